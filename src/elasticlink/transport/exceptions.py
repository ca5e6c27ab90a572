"""传输层异常定义模块."""

from ..exceptions import ElasticLinkError


class TransportFailureError(ElasticLinkError):
    """传输层 I/O 异常.

    当底层传输无法取得响应时抛出，例如连接被拒绝、超时、TLS 握手失败。
    该异常被调度器视为可重试。

    Attributes:
        address: 发生失败的节点地址（字符串形式）
        timeout: 是否为超时导致的失败
    """

    def __init__(self, message: str, address: str | None = None, timeout: bool = False):
        super().__init__(message)
        self.address = address
        self.timeout = timeout
