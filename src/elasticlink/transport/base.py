"""传输能力协议定义模块."""

from typing import Protocol, runtime_checkable

from ..address import Address
from .models import Request, Response


@runtime_checkable
class Transport(Protocol):
    """可插拔的传输能力.

    实现方负责把一个请求发往指定节点并返回一个响应，不做重试、
    节点选择或产品校验。实现必须支持多线程并发调用。

    无法取得响应时必须抛出 TransportFailureError；取得任何 HTTP 响应
    （包括 4xx/5xx）时都应正常返回 Response。
    """

    def perform(self, address: Address, request: Request) -> Response:
        """向 address 发送 request 并返回响应."""
        ...
