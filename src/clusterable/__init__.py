"""
clusterable
任意可度量对象上的密度聚类（DBSCAN）
"""

from .clustering import (Cluster, Clusterable, DBSCANSequential, DuplicateIdentifierError,
                         VisitMap, VisitState, clusterize)

__version__ = "0.1.0"

__all__ = [
    'Cluster',
    'Clusterable',
    'DBSCANSequential',
    'DuplicateIdentifierError',
    'VisitMap',
    'VisitState',
    'clusterize'
]
