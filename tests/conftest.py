"""
Pytest配置和共享fixture

提供:
- 一维点SimpleClusterable（标识符默认取坐标）
- 二维欧氏点Point2D
- 常用测试数据集
"""

import math
from dataclasses import dataclass
from typing import List, Optional

import numpy as np
import pytest

from clusterable.clustering import VisitMap


@dataclass(frozen=True)
class SimpleClusterable:
    """一维点"""
    position: float
    name: Optional[str] = None

    def get_id(self) -> str:
        return self.name if self.name is not None else str(self.position)

    def distance(self, other: 'SimpleClusterable') -> float:
        return abs(other.position - self.position)


@dataclass(frozen=True)
class Point2D:
    """二维欧氏点"""
    name: str
    x: float
    y: float

    def get_id(self) -> str:
        return self.name

    def distance(self, other: 'Point2D') -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


def make_points(positions) -> List[SimpleClusterable]:
    return [SimpleClusterable(float(p)) for p in positions]


def positions_of(points) -> List[float]:
    return [p.position for p in points]


@pytest.fixture
def visited():
    """新的访问状态表"""
    return VisitMap()


@pytest.fixture
def two_groups():
    """两组相距较远的一维点"""
    return make_points([0, 0.5, 1, 4, 4.5, 5])


@pytest.fixture
def two_blobs():
    """
    两个3x3网格点团（间距0.1）和一个离群点

    - 点团A: 以(0, 0)为起点
    - 点团B: 以(10, 10)为起点
    - 离群点: (5, 5)
    """
    points = []
    for blob, (ox, oy) in (('a', (0.0, 0.0)), ('b', (10.0, 10.0))):
        for i in range(3):
            for j in range(3):
                points.append(Point2D(f"{blob}{i}{j}", ox + 0.1 * i, oy + 0.1 * j))
    points.append(Point2D("outlier", 5.0, 5.0))
    return points


@pytest.fixture
def random_points():
    """固定种子的随机一维点集生成器"""
    def _generate(seed: int) -> List[SimpleClusterable]:
        rng = np.random.default_rng(seed)
        n_points = int(rng.integers(5, 105))
        return [SimpleClusterable(float(x), name=f"p{i}")
                for i, x in enumerate(rng.random(n_points))]
    return _generate
