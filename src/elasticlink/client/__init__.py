"""客户端模块 - 请求调度、重试、产品校验与指标统计.

主要组件:
    - Client: 传输核心客户端
    - ProductVerifier: 产品校验器
    - Metrics / MetricsSnapshot / MetricEvent: 指标统计

使用示例:
    from elasticlink.client import Client
    from elasticlink.connection import ClientConfig

    client = Client(ClientConfig(addresses=["http://localhost:9200"], enable_metrics=True))
    print(client.metrics())
"""

from .exceptions import (
    ClientError,
    MetricsDisabledError,
    RetriesExhaustedError,
    UnrecognizedProductError,
)
from .metrics import MetricEvent, Metrics, MetricsSnapshot
from .tool import Client
from .verifier import PRODUCT_HEADER, PRODUCT_NAME, ProductVerifier, check_info_payload

__all__ = [
    # 客户端
    "Client",
    # 产品校验
    "ProductVerifier",
    "check_info_payload",
    "PRODUCT_HEADER",
    "PRODUCT_NAME",
    # 指标
    "Metrics",
    "MetricsSnapshot",
    "MetricEvent",
    # 异常
    "ClientError",
    "UnrecognizedProductError",
    "RetriesExhaustedError",
    "MetricsDisabledError",
]
