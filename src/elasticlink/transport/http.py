"""默认 HTTP 传输模块.

基于 elastic_transport 的 Urllib3HttpNode 实现 Transport 协议。每个节点地址
惰性创建并缓存一个 Urllib3HttpNode，节点自身维护 urllib3 连接池，
因此可以被多个线程并发使用。

使用示例:
    from elasticlink.transport import ElasticHttpTransport, Request

    with ElasticHttpTransport() as transport:
        response = transport.perform(address, Request("GET", "/"))
"""

from __future__ import annotations

import logging
import threading

from elastic_transport import (
    ConnectionTimeout,
    HttpHeaders,
    NodeConfig,
    TransportError,
    Urllib3HttpNode,
)

from ..address import Address
from ..connection.models import ConnectionConfig
from .exceptions import TransportFailureError
from .models import Request, Response

logger = logging.getLogger(__name__)


class ElasticHttpTransport:
    """基于 urllib3 的默认传输实现.

    仅负责“一个请求换一个响应”，不做重试与节点选择。

    Attributes:
        _connection_config: 连接池配置
        _nodes: 按地址缓存的 Urllib3HttpNode 字典

    Args:
        connection_config: 连接池配置，默认使用 ConnectionConfig 的默认值
    """

    def __init__(self, connection_config: ConnectionConfig | None = None) -> None:
        self._connection_config = connection_config or ConnectionConfig()
        self._nodes: dict[Address, Urllib3HttpNode] = {}
        self._lock = threading.Lock()

    def _create_node(self, address: Address) -> Urllib3HttpNode:
        """根据地址与连接池配置创建节点.

        Raises:
            TransportFailureError: 协议没有默认端口且地址未指定端口时抛出
        """
        port = address.effective_port
        if port is None:
            raise TransportFailureError(
                f"无法确定地址 {address} 的端口", address=str(address)
            )
        config = self._connection_config
        node_config = NodeConfig(
            scheme=address.scheme,
            host=address.host,
            port=port,
            path_prefix=address.path,
            connections_per_node=config.connections_per_node,
            request_timeout=config.request_timeout,
            http_compress=config.http_compress,
            verify_certs=config.verify_certs,
            ca_certs=config.ca_certs,
        )
        return Urllib3HttpNode(node_config)

    def _get_node(self, address: Address) -> Urllib3HttpNode:
        with self._lock:
            node = self._nodes.get(address)
            if node is None:
                node = self._create_node(address)
                self._nodes[address] = node
            return node

    def perform(self, address: Address, request: Request) -> Response:
        """向指定节点发送请求.

        Args:
            address: 目标节点地址
            request: 请求描述

        Returns:
            响应描述（任何 HTTP 状态码都会正常返回）

        Raises:
            TransportFailureError: 连接失败、超时或 TLS 异常时抛出
        """
        node = self._get_node(address)
        try:
            meta, body = node.perform_request(
                request.method,
                request.path,
                body=request.body,
                headers=HttpHeaders(request.headers),
            )
        except ConnectionTimeout as e:
            raise TransportFailureError(
                f"请求 {request.target_url(address)} 超时: {e}",
                address=str(address),
                timeout=True,
            ) from e
        except TransportError as e:
            raise TransportFailureError(
                f"请求 {request.target_url(address)} 失败: {e}",
                address=str(address),
            ) from e

        return Response(status=meta.status, headers=meta.headers, body=body)

    # ============================================================
    # 生命周期管理
    # ============================================================

    def __enter__(self) -> ElasticHttpTransport:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """关闭所有已创建的节点并清空缓存.

        关闭后再次调用 perform() 会重新创建节点。
        """
        with self._lock:
            nodes = list(self._nodes.values())
            self._nodes.clear()
        for node in nodes:
            node.close()
        logger.info(f"已关闭 {len(nodes)} 个 HTTP 节点")
