"""连接配置异常定义模块."""

from ..exceptions import ElasticLinkError


class ConnectionConfigError(ElasticLinkError):
    """连接配置校验异常.

    当连接配置参数不合法时抛出，例如 max_retries 小于 0、
    connections_per_node 小于 1 等。
    """

    pass


class ConflictingConfigurationError(ConnectionConfigError):
    """地址来源冲突异常.

    当显式地址列表与 Cloud ID 同时配置时抛出。
    """

    pass


class NoEndpointsError(ConnectionConfigError):
    """无可用节点异常.

    当解析后的地址集合为空、无法构造连接池时抛出。
    """

    pass
