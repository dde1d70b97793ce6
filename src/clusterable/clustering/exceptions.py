"""
聚类异常与警告定义
"""


class ClusteringError(Exception):
    """聚类模块的基础异常"""


class DuplicateIdentifierError(ClusteringError, ValueError):
    """输入点集中存在重复的标识符"""

    def __init__(self, point_id):
        self.point_id = point_id
        super().__init__(f"重复的点标识符: {point_id!r}")


class StateTransitionError(ClusteringError):
    """非法的访问状态转换（已聚类的点不能回退为噪声）"""


class NotFittedError(ClusteringError, AttributeError):
    """聚类器尚未执行fit"""


class DegenerateParameterWarning(UserWarning):
    """参数合法但会导致退化的聚类结果"""


class DroppedClusterWarning(UserWarning):
    """候选聚类因规模不足min_samples被丢弃"""
