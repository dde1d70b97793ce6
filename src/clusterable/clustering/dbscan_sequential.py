"""
串行DBSCAN实现
基于点能力约定（标识符 + 距离）的密度聚类
"""

import numbers
import time
import warnings
from typing import Dict, Hashable, List, Optional, Sequence

import numpy as np
import pandas as pd

from .exceptions import (DegenerateParameterWarning, DroppedClusterWarning,
                         DuplicateIdentifierError, NotFittedError)
from .point import Cluster, Clusterable, VisitMap
from .utils import expand_cluster, region_query


def clusterize(points: Sequence[Clusterable], min_pts: int, eps: float,
               visited: Optional[VisitMap] = None) -> List[Cluster]:
    """
    执行DBSCAN聚类

    按输入顺序遍历每个点：邻域（含自身）达到min_pts的点作为种子创建聚类
    并扩展，扩展后规模不足min_pts的候选聚类被丢弃（其中的点仍保持已聚类
    状态）；其余点标记为噪声。

    Args:
        points: 可聚类点序列，标识符必须唯一
        min_pts: 核心点的最小点数（含自身）
        eps: 邻域半径
        visited: 访问状态表（可选，传入时可在调用后查看各点的最终状态）

    Returns:
        聚类列表，每个聚类按发现顺序排列

    Raises:
        DuplicateIdentifierError: 输入中存在重复标识符
    """
    _check_unique_ids(points)

    if visited is None:
        visited = VisitMap()

    clusters = []

    for point in points:
        if visited.is_visited(point):  # 已访问的点
            continue

        neighbors = region_query(point, points, visited, eps)

        if len(neighbors) + 1 >= min_pts:
            # 发现核心点，开始新的聚类
            visited.mark_clustered(point)
            cluster = expand_cluster([point], neighbors, visited, min_pts, eps)

            if len(cluster) >= min_pts:
                clusters.append(cluster)
        else:
            visited.mark_noise(point)

    return clusters


def _check_unique_ids(points: Sequence[Clusterable]) -> None:
    seen = set()
    for point in points:
        point_id = point.get_id()
        if point_id in seen:
            raise DuplicateIdentifierError(point_id)
        seen.add(point_id)


class DBSCANSequential:
    """串行版本的DBSCAN聚类算法"""

    def __init__(self, eps: float = 1.0, min_samples: int = 5,
                 warn_on_drop: bool = False):
        """
        初始化DBSCAN参数

        Args:
            eps: 邻域半径（与点的距离函数同单位）
            min_samples: 核心点的最小点数（含自身）
            warn_on_drop: 是否在候选聚类被丢弃时发出警告
        """
        if isinstance(eps, bool) or not isinstance(eps, numbers.Real):
            raise TypeError(f"eps必须是实数: {eps!r}")
        if isinstance(min_samples, bool) or not isinstance(min_samples, numbers.Integral):
            raise TypeError(f"min_samples必须是整数: {min_samples!r}")

        if min_samples <= 1:
            warnings.warn(f"min_samples={min_samples}，每个点都可以单独成为聚类",
                          DegenerateParameterWarning, stacklevel=2)
        if eps < 0:
            warnings.warn(f"eps={eps} 为负数，所有点都将被标记为噪声",
                          DegenerateParameterWarning, stacklevel=2)

        self.eps = float(eps)
        self.min_samples = int(min_samples)
        self.warn_on_drop = warn_on_drop

        self.clusters_ = None
        self.labels_ = None
        self.core_sample_indices_ = None
        self.stranded_indices_ = None
        self.point_ids_ = None
        self.execution_time = 0

    def fit(self, points: Sequence[Clusterable]) -> 'DBSCANSequential':
        """
        执行DBSCAN聚类

        Args:
            points: 可聚类点序列

        Returns:
            self: 返回聚类器实例
        """
        start_time = time.time()

        points = list(points)
        visited = VisitMap()
        clusters = clusterize(points, self.min_samples, self.eps, visited)

        index_of: Dict[Hashable, int] = {p.get_id(): i for i, p in enumerate(points)}

        # 标签：0表示噪声（含被丢弃聚类中的点），聚类从1开始编号
        labels = np.zeros(len(points), dtype=np.int32)
        core_indices = []

        for cluster_id, cluster in enumerate(clusters, start=1):
            for point in cluster:
                labels[index_of[point.get_id()]] = cluster_id
            # 聚类的第一个点是其种子点
            core_indices.append(index_of[cluster[0].get_id()])

        stranded = [i for i, p in enumerate(points)
                    if visited.is_clustered(p) and labels[i] == 0]

        if stranded and self.warn_on_drop:
            warnings.warn(f"{len(stranded)} 个点属于被丢弃的候选聚类，未分配到任何聚类",
                          DroppedClusterWarning, stacklevel=2)

        # 保存结果
        self.clusters_ = clusters
        self.labels_ = labels
        self.core_sample_indices_ = np.array(core_indices, dtype=np.int32)
        self.stranded_indices_ = np.array(stranded, dtype=np.int32)
        self.point_ids_ = [p.get_id() for p in points]
        self.execution_time = time.time() - start_time

        return self

    def fit_predict(self, points: Sequence[Clusterable]) -> np.ndarray:
        """执行聚类并返回标签数组"""
        return self.fit(points).labels_

    def _check_fitted(self):
        if self.labels_ is None:
            raise NotFittedError("DBSCANSequential尚未执行fit")

    def get_cluster_stats(self) -> dict:
        """
        获取聚类统计信息

        Returns:
            包含聚类统计信息的字典
        """
        self._check_fitted()

        stats = {
            'n_clusters': len(self.clusters_),
            'n_noise': int(np.sum(self.labels_ == 0)) - len(self.stranded_indices_),
            'n_core_points': len(self.core_sample_indices_),
            'n_stranded': len(self.stranded_indices_),
            'execution_time': self.execution_time,
            'cluster_sizes': {}
        }

        for cluster_id, cluster in enumerate(self.clusters_, start=1):
            stats['cluster_sizes'][cluster_id] = len(cluster)

        return stats

    def to_dataframe(self) -> pd.DataFrame:
        """
        将聚类结果转换为DataFrame

        Returns:
            每个输入点一行，包含point_id、label、is_noise、is_stranded
        """
        self._check_fitted()

        is_stranded = np.zeros(len(self.labels_), dtype=bool)
        is_stranded[self.stranded_indices_] = True

        return pd.DataFrame({
            'point_id': self.point_ids_,
            'label': self.labels_,
            'is_noise': (self.labels_ == 0) & ~is_stranded,
            'is_stranded': is_stranded
        })
