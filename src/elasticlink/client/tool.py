"""Elasticsearch 客户端调度模块.

提供 Client 类：按配置解析地址、构造轮询连接池，并对每次逻辑请求执行
“选节点 → 发送 → 重试 → 产品校验 → 统计指标”的完整流程。

使用示例:
    from elasticlink import Client, ClientConfig, Request

    with Client(ClientConfig(addresses=["http://localhost:9200"])) as client:
        response = client.perform(Request("GET", "/_cat/indices"))
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from ..address import DEFAULT_PORTS, Address, InvalidAddressError
from ..connection.models import ClientConfig, ConnectionConfig
from ..connection.pool import ConnectionPool
from ..connection.tool import resolve_config_addresses
from ..transport.base import Transport
from ..transport.exceptions import TransportFailureError
from ..transport.http import ElasticHttpTransport
from ..transport.models import Request, Response
from ..typing import EnvReader
from .exceptions import MetricsDisabledError, RetriesExhaustedError
from .metrics import MetricEvent, Metrics, MetricsSnapshot
from .verifier import ProductVerifier

logger = logging.getLogger(__name__)


class Client:
    """Elasticsearch 传输核心客户端.

    构造阶段完成配置校验与地址解析，任何配置错误都会在此直接抛出。
    客户端独占连接池与产品校验状态；传输实现可以由外部注入并在多个客户端间共享，
    此时 close() 不会关闭它。

    Attributes:
        _pool: 轮询连接池
        _transport: 传输实现
        _verifier: 产品校验器
        _metrics: 指标计数器，未启用时为 None

    Args:
        config: 客户端配置，默认使用 ClientConfig 的默认值
        connection_config: 默认 HTTP 传输的连接池配置，注入 transport 时忽略
        env_reader: 环境变量读取函数，默认 os.environ.get
        sleep: 重试退避时使用的休眠函数，默认 time.sleep

    Raises:
        ConflictingConfigurationError: addresses 与 cloud_id 同时配置时抛出
        InvalidAddressError: 地址不合法时抛出
        MalformedCloudIDError: Cloud ID 格式错误时抛出
        InvalidEncodingError: Cloud ID 编码错误时抛出
        NoEndpointsError: 地址集合为空时抛出

    Examples:
        >>> client = Client(ClientConfig(addresses=["http://localhost:9200"]))
        >>> [str(u) for u in client.urls()]
        ['http://localhost:9200']
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        connection_config: ConnectionConfig | None = None,
        env_reader: EnvReader | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._config = config or ClientConfig()
        self._pool = ConnectionPool(
            resolve_config_addresses(self._config, env_reader),
            persist_cursor=self._config.persist_cursor,
        )
        self._owns_transport = self._config.transport is None
        if self._owns_transport:
            self._check_schemes()
        self._transport: Transport = self._config.transport or ElasticHttpTransport(
            connection_config
        )
        self._verifier = ProductVerifier(info_fallback=self._config.product_info_fallback)
        self._metrics = Metrics() if self._config.enable_metrics else None
        self._sleep = sleep
        logger.info(
            f"初始化客户端: urls={[str(u) for u in self._pool.urls()]}, "
            f"enable_retry={self._config.enable_retry}, "
            f"max_retries={self._config.max_retries}"
        )

    @classmethod
    def from_env(cls, env_reader: EnvReader | None = None) -> Client:
        """使用默认配置创建客户端，地址取自环境变量或默认地址."""
        return cls(ClientConfig(), env_reader=env_reader)

    @property
    def product_check_success(self) -> bool:
        """产品校验是否已经通过（通过后永久为 True）."""
        return self._verifier.verified

    def urls(self) -> tuple[Address, ...]:
        """返回连接池中的地址快照."""
        return self._pool.urls()

    def metrics(self) -> MetricsSnapshot:
        """返回指标快照.

        Raises:
            MetricsDisabledError: 未启用指标时抛出
        """
        if self._metrics is None:
            raise MetricsDisabledError("指标未启用，请在 ClientConfig 中设置 enable_metrics=True")
        return self._metrics.snapshot()

    def _check_schemes(self) -> None:
        """默认 HTTP 传输只支持 http/https，其它协议在构造阶段直接拒绝.

        Raises:
            InvalidAddressError: 存在不受支持的协议时抛出
        """
        unsupported = [str(u) for u in self._pool.urls() if u.scheme not in DEFAULT_PORTS]
        if unsupported:
            raise InvalidAddressError(
                f"默认 HTTP 传输只支持 {sorted(DEFAULT_PORTS)} 协议，不支持的地址: {unsupported}"
            )

    def _fetch_info(self, address: Address) -> Response:
        """向 address 请求根路径信息，响应状态码计入指标."""
        response = self._transport.perform(address, Request("GET", "/"))
        if self._metrics is not None:
            self._metrics.record_response(response.status)
        return response

    def _record(self, event: MetricEvent) -> None:
        if self._metrics is not None:
            self._metrics.record(event)

    def _is_retryable(self, error: TransportFailureError) -> bool:
        return self._config.retry_on_timeout or not error.timeout

    def _max_attempts(self) -> int:
        if self._config.enable_retry:
            return self._config.max_retries + 1
        return 1

    def _backoff(self, retry: int) -> None:
        if self._config.retry_backoff is None:
            return
        delay = self._config.retry_backoff(retry)
        if delay > 0:
            self._sleep(delay)

    def _dispatch(self, request: Request) -> tuple[Address, Response]:
        """执行有限次数的尝试，返回最后一次取得响应的节点与响应.

        Raises:
            TransportFailureError: 仅尝试一次且传输失败，或失败不可重试时抛出
            RetriesExhaustedError: 多次尝试均传输失败时抛出
        """
        max_attempts = self._max_attempts()
        endpoints = self._pool.cycle()
        last_error: TransportFailureError | None = None

        for attempt in range(1, max_attempts + 1):
            if attempt > 1:
                self._record(MetricEvent.RETRY)
                self._backoff(attempt - 1)

            address = next(endpoints)
            try:
                response = self._transport.perform(address, request)
            except TransportFailureError as e:
                last_error = e
                if not self._is_retryable(e):
                    raise
                logger.warning(
                    f"第 {attempt}/{max_attempts} 次尝试失败: "
                    f"{request.method} {request.target_url(address)}, 错误: {e}"
                )
                continue

            if self._metrics is not None:
                self._metrics.record_response(response.status)
            if response.status in self._config.retry_on_status and attempt < max_attempts:
                logger.warning(
                    f"第 {attempt}/{max_attempts} 次尝试返回可重试状态码 {response.status}: "
                    f"{request.method} {request.target_url(address)}"
                )
                continue
            return address, response

        assert last_error is not None
        if max_attempts == 1:
            raise last_error
        raise RetriesExhaustedError(max_attempts, last_error) from last_error

    def perform(self, request: Request) -> Response:
        """执行一次逻辑请求.

        可重试的失败（传输失败、retry_on_status 中的状态码）会在重试预算内
        透明重试；其它结果立即返回。返回前对响应做产品校验，直到首次通过。

        Args:
            request: 请求描述

        Returns:
            响应描述

        Raises:
            TransportFailureError: 传输失败且未启用重试时抛出
            RetriesExhaustedError: 重试耗尽且均为传输失败时抛出
            UnrecognizedProductError: 远端未通过产品校验时抛出
        """
        self._record(MetricEvent.REQUEST)
        try:
            address, response = self._dispatch(request)
            if not self._verifier.verified:
                self._verifier.verify(
                    response,
                    fetch_info=lambda: self._fetch_info(address),
                )
        except Exception as e:
            self._record(MetricEvent.FAILURE)
            logger.error(f"请求 {request.method} {request.path} 失败: {e}")
            raise
        return response

    # ============================================================
    # 生命周期管理
    # ============================================================

    def __enter__(self) -> Client:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """关闭客户端自行创建的传输实现，外部注入的传输不受影响."""
        if self._owns_transport and isinstance(self._transport, ElasticHttpTransport):
            self._transport.close()
