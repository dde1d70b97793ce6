"""
聚类算法模块
基于点能力约定的串行DBSCAN实现
"""

from .dbscan_sequential import DBSCANSequential, clusterize
from .exceptions import (ClusteringError, DegenerateParameterWarning, DroppedClusterWarning,
                         DuplicateIdentifierError, NotFittedError, StateTransitionError)
from .point import Cluster, Clusterable, VisitMap, VisitState
from .utils import expand_cluster, merge_clusters, put_all, region_query

__all__ = [
    'DBSCANSequential',
    'clusterize',
    'Cluster',
    'Clusterable',
    'VisitMap',
    'VisitState',
    'region_query',
    'expand_cluster',
    'merge_clusters',
    'put_all',
    'ClusteringError',
    'DuplicateIdentifierError',
    'StateTransitionError',
    'NotFittedError',
    'DegenerateParameterWarning',
    'DroppedClusterWarning'
]
