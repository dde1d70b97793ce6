"""
可聚类点的能力约定与访问状态
聚类算法只依赖点的标识符和距离计算，与具体数据类型解耦
"""

from enum import Enum
from typing import Dict, Hashable, Iterable, List, Optional, Protocol, runtime_checkable

from .exceptions import StateTransitionError


@runtime_checkable
class Clusterable(Protocol):
    """可聚类对象：稳定唯一的标识符 + 对称的距离函数"""

    def get_id(self) -> Hashable:
        ...

    def distance(self, other: 'Clusterable') -> float:
        ...


Cluster = List[Clusterable]


class VisitState(Enum):
    """点的访问状态（未访问的点不在映射中）"""
    NOISE = "noise"
    CLUSTERED = "clustered"


class VisitMap:
    """
    一次聚类调用内的访问状态表

    标识符 -> VisitState 的映射，由编排函数持有并传递给
    邻域查询、聚类扩展和合并函数。
    """

    def __init__(self):
        self._states: Dict[Hashable, VisitState] = {}

    def state(self, point: Clusterable) -> Optional[VisitState]:
        """返回点的状态，未访问时返回None"""
        return self._states.get(point.get_id())

    def is_visited(self, point: Clusterable) -> bool:
        return point.get_id() in self._states

    def is_clustered(self, point: Clusterable) -> bool:
        return self._states.get(point.get_id()) is VisitState.CLUSTERED

    def is_noise(self, point: Clusterable) -> bool:
        return self._states.get(point.get_id()) is VisitState.NOISE

    def mark_noise(self, point: Clusterable) -> None:
        """
        标记为噪声

        Raises:
            StateTransitionError: 点已被聚类
        """
        point_id = point.get_id()
        if self._states.get(point_id) is VisitState.CLUSTERED:
            raise StateTransitionError(f"点 {point_id!r} 已聚类，不能标记为噪声")
        self._states[point_id] = VisitState.NOISE

    def mark_clustered(self, point: Clusterable) -> None:
        self._states[point.get_id()] = VisitState.CLUSTERED

    def snapshot(self, points: Iterable[Clusterable]) -> Dict[Hashable, Optional[VisitState]]:
        """
        记录一组点当前的状态

        Args:
            points: 点序列

        Returns:
            标识符到状态的字典（未访问为None）
        """
        return {point.get_id(): self.state(point) for point in points}

    def clustered_ids(self) -> List[Hashable]:
        return [pid for pid, s in self._states.items() if s is VisitState.CLUSTERED]

    def noise_ids(self) -> List[Hashable]:
        return [pid for pid, s in self._states.items() if s is VisitState.NOISE]

    def __contains__(self, point_id: Hashable) -> bool:
        return point_id in self._states

    def __len__(self) -> int:
        return len(self._states)

    def __repr__(self) -> str:
        return (f"VisitMap(clustered={len(self.clustered_ids())}, "
                f"noise={len(self.noise_ids())})")
