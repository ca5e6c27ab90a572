"""连接配置数据模型定义模块.

提供客户端构造所需的数据模型，包括：
- ClientConfig: 地址来源、重试策略与指标开关
- ConnectionConfig: 默认 HTTP 传输的连接池配置
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..typing import BackoffFunc
from .exceptions import ConnectionConfigError

if TYPE_CHECKING:
    from ..transport.base import Transport

# 默认视为可重试的 HTTP 状态码
DEFAULT_RETRY_ON_STATUS = frozenset({502, 503, 504})


@dataclass
class ClientConfig:
    """客户端配置模型.

    addresses 与 cloud_id 互斥，二者都未配置时依次回退到环境变量
    ``ELASTICSEARCH_URL`` 和默认地址 ``http://localhost:9200``。

    Attributes:
        addresses: 显式地址列表
        cloud_id: Cloud ID（``name:base64`` 格式）
        transport: 外部注入的传输实现，None 时使用默认 HTTP 传输
        enable_retry: 是否启用重试，默认 True
        max_retries: 最大重试次数，默认 3，必须 >= 0
        retry_on_status: 视为可重试的 HTTP 状态码集合，默认 502/503/504
        retry_on_timeout: 超时是否重试，默认 True
        retry_backoff: 重试退避函数，参数为重试序号，返回等待秒数
        enable_metrics: 是否启用指标统计，默认 False
        persist_cursor: 轮询游标是否跨请求保持，默认 True
        product_info_fallback: 响应缺少产品标识头时是否回退到 ``GET /`` 校验，
            默认 False，即默认只认产品标识头，缺失即判定校验失败；
            需要兼容 7.14 之前不返回该头的版本时再开启

    Raises:
        ConnectionConfigError: 当参数不合法时抛出

    Examples:
        >>> config = ClientConfig(
        ...     addresses=["http://node1:9200", "http://node2:9200"],
        ...     max_retries=5,
        ... )
    """

    addresses: list[str] = field(default_factory=list)
    cloud_id: str | None = None
    transport: Transport | None = None
    enable_retry: bool = True
    max_retries: int = 3
    retry_on_status: frozenset[int] = DEFAULT_RETRY_ON_STATUS
    retry_on_timeout: bool = True
    retry_backoff: BackoffFunc | None = None
    enable_metrics: bool = False
    persist_cursor: bool = True
    product_info_fallback: bool = False

    def __post_init__(self) -> None:
        """校验客户端配置参数合法性."""
        if self.max_retries < 0:
            raise ConnectionConfigError(
                f"max_retries 必须 >= 0，当前值: {self.max_retries}"
            )
        self.retry_on_status = frozenset(self.retry_on_status)
        invalid = sorted(
            (
                s
                for s in self.retry_on_status
                if isinstance(s, bool) or not isinstance(s, int) or not 100 <= s <= 599
            ),
            key=str,
        )
        if invalid:
            raise ConnectionConfigError(
                f"retry_on_status 只能包含 HTTP 状态码，非法值: {invalid}"
            )


@dataclass
class ConnectionConfig:
    """连接池配置模型.

    定义默认 HTTP 传输（基于 elastic_transport 的 urllib3 节点）的连接参数。

    Attributes:
        connections_per_node: 每个节点的最大连接数，默认 10，必须 >= 1
        request_timeout: 请求超时时间（秒），默认 30，必须 >= 0
        http_compress: 是否启用 HTTP 压缩，默认 False
        verify_certs: 是否验证 SSL 证书，默认 True
        ca_certs: CA 证书文件路径

    Raises:
        ConnectionConfigError: 当参数不合法时抛出

    Examples:
        >>> config = ConnectionConfig(connections_per_node=20, request_timeout=60)
    """

    connections_per_node: int = 10
    request_timeout: float = 30
    http_compress: bool = False
    verify_certs: bool = True
    ca_certs: str | None = None

    def __post_init__(self) -> None:
        """校验连接池配置参数合法性."""
        if self.connections_per_node < 1:
            raise ConnectionConfigError(
                f"connections_per_node 必须 >= 1，当前值: {self.connections_per_node}"
            )
        if self.request_timeout < 0:
            raise ConnectionConfigError(
                f"request_timeout 必须 >= 0，当前值: {self.request_timeout}"
            )
