"""连接配置模块 - 校验地址来源、构造轮询连接池.

主要组件:
    - ClientConfig: 客户端配置模型
    - ConnectionConfig: 默认 HTTP 传输的连接池配置模型
    - ConnectionPool: 轮询连接池
    - resolve_config_addresses: 按优先级确定地址集合

使用示例:
    from elasticlink.connection import ClientConfig, ConnectionPool, resolve_config_addresses

    pool = ConnectionPool(resolve_config_addresses(ClientConfig(addresses=["http://localhost:9200"])))
    address = pool.next()
"""

from .exceptions import (
    ConflictingConfigurationError,
    ConnectionConfigError,
    NoEndpointsError,
)
from .models import DEFAULT_RETRY_ON_STATUS, ClientConfig, ConnectionConfig
from .pool import ConnectionPool
from .tool import (
    DEFAULT_ADDRESS,
    ENV_ADDRESS_VARIABLE,
    addresses_from_environment,
    resolve_config_addresses,
)

__all__ = [
    # 模型
    "ClientConfig",
    "ConnectionConfig",
    "DEFAULT_RETRY_ON_STATUS",
    # 连接池
    "ConnectionPool",
    # 配置校验
    "resolve_config_addresses",
    "addresses_from_environment",
    "ENV_ADDRESS_VARIABLE",
    "DEFAULT_ADDRESS",
    # 异常
    "ConnectionConfigError",
    "ConflictingConfigurationError",
    "NoEndpointsError",
]
