"""elasticlink - Elasticsearch 客户端传输核心.

负责把地址、环境变量或 Cloud ID 解析为节点集合，并在节点池上执行带重试、
产品校验和指标统计的请求调度。

主要功能:
    - resolve_addresses / resolve_cloud_id: 地址与 Cloud ID 解析
    - ConnectionPool: 轮询连接池
    - Client: 请求调度（重试、产品校验、指标）
    - ElasticHttpTransport: 基于 elastic_transport 的默认 HTTP 传输

使用示例:
    from elasticlink import Client, ClientConfig, Request

    client = Client(ClientConfig(cloud_id="name:base64..."))
    response = client.perform(Request("GET", "/_cluster/health"))
"""

__version__ = "0.1.0"

# 导出地址解析
from elasticlink.address import (
    Address,
    AddressError,
    InvalidAddressError,
    InvalidEncodingError,
    MalformedCloudIDError,
    parse_address,
    resolve_addresses,
    resolve_cloud_id,
)

# 导出客户端
from elasticlink.client import (
    Client,
    ClientError,
    MetricEvent,
    Metrics,
    MetricsDisabledError,
    MetricsSnapshot,
    ProductVerifier,
    RetriesExhaustedError,
    UnrecognizedProductError,
)

# 导出连接配置
from elasticlink.connection import (
    ClientConfig,
    ConflictingConfigurationError,
    ConnectionConfig,
    ConnectionConfigError,
    ConnectionPool,
    NoEndpointsError,
    resolve_config_addresses,
)

# 导出异常基类
from elasticlink.exceptions import ElasticLinkError

# 导出传输
from elasticlink.transport import (
    ElasticHttpTransport,
    Request,
    Response,
    Transport,
    TransportFailureError,
)

__all__ = [
    # 版本
    "__version__",
    # 地址
    "Address",
    "parse_address",
    "resolve_addresses",
    "resolve_cloud_id",
    # 连接配置
    "ClientConfig",
    "ConnectionConfig",
    "ConnectionPool",
    "resolve_config_addresses",
    # 传输
    "Request",
    "Response",
    "Transport",
    "ElasticHttpTransport",
    # 客户端
    "Client",
    "ProductVerifier",
    "Metrics",
    "MetricsSnapshot",
    "MetricEvent",
    # 异常
    "ElasticLinkError",
    "AddressError",
    "InvalidAddressError",
    "MalformedCloudIDError",
    "InvalidEncodingError",
    "ConnectionConfigError",
    "ConflictingConfigurationError",
    "NoEndpointsError",
    "TransportFailureError",
    "ClientError",
    "UnrecognizedProductError",
    "RetriesExhaustedError",
    "MetricsDisabledError",
]
