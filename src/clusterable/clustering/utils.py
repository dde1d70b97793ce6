"""
聚类工具函数
DBSCAN的邻域查询、聚类扩展与聚类合并
"""

from typing import Dict, Hashable, List, Sequence

from .point import Cluster, Clusterable, VisitMap, VisitState


def region_query(point: Clusterable, candidates: Sequence[Clusterable],
                 visited: VisitMap, eps: float) -> List[Clusterable]:
    """
    查找指定点邻域内尚未聚类的点（暴力计算）

    Args:
        point: 目标点
        candidates: 候选点序列（不一定是完整数据集）
        visited: 访问状态表（只读）
        eps: 邻域半径

    Returns:
        邻域内点的列表，保持候选序列顺序，不包含目标点自身
    """
    neighbors = []
    point_id = point.get_id()

    for candidate in candidates:
        # 已聚类的点不再参与邻域
        if visited.is_clustered(candidate):
            continue

        if candidate.get_id() != point_id and candidate.distance(point) <= eps:
            neighbors.append(candidate)

    return neighbors


def put_all(mapping: Dict[Hashable, Clusterable],
            points: Sequence[Clusterable]) -> Dict[Hashable, Clusterable]:
    """
    将点按标识符放入字典，键即点的唯一集合

    Args:
        mapping: 目标字典（原地修改）
        points: 点序列

    Returns:
        修改后的字典
    """
    for point in points:
        mapping[point.get_id()] = point
    return mapping


def merge_clusters(cluster: Sequence[Clusterable], new_points: Sequence[Clusterable],
                   visited: VisitMap) -> Cluster:
    """
    将新点并入聚类

    新点全部标记为已聚类；按标识符去重，先出现者保留，相对顺序不变。

    Args:
        cluster: 现有聚类
        new_points: 待合并的点
        visited: 访问状态表

    Returns:
        合并后的新聚类列表
    """
    for point in new_points:
        visited.mark_clustered(point)

    merged = list(cluster)
    seen = {point.get_id() for point in merged}

    for point in new_points:
        point_id = point.get_id()
        if point_id not in seen:
            seen.add(point_id)
            merged.append(point)

    return merged


def expand_cluster(cluster: Sequence[Clusterable], neighbors: Sequence[Clusterable],
                   visited: VisitMap, min_pts: int, eps: float) -> Cluster:
    """
    从种子点扩展聚类

    只遍历种子列表的一份拷贝，新发现的点不会在本轮再次遍历；
    每个种子点的邻域也只在这份拷贝内查找。种子点按扩展开始时的
    状态处理：开始时未访问的点即使在本轮中已被并入，仍会检查其邻域。

    Args:
        cluster: 初始聚类（已包含种子点且已标记）
        neighbors: 种子邻居列表
        visited: 访问状态表
        min_pts: 核心点的最小点数（含自身）
        eps: 邻域半径

    Returns:
        扩展后的聚类（不检查规模）
    """
    seeds = list(neighbors)
    initial_states = visited.snapshot(seeds)
    cluster = list(cluster)

    for point in seeds:
        state = initial_states[point.get_id()]

        if state is None:
            current_neighbors = region_query(point, seeds, visited, eps)
            if len(current_neighbors) + 1 >= min_pts:
                cluster = merge_clusters(cluster, current_neighbors, visited)

        elif state is VisitState.NOISE:
            # 之前标记为噪声，重新标记
            cluster = merge_clusters(cluster, [point], visited)

    return cluster
