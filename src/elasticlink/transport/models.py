"""传输层数据模型定义模块."""

import json
from dataclasses import dataclass, field
from typing import Any

from elastic_transport import HttpHeaders

from ..address import Address
from ..typing import HeadersDict


@dataclass(frozen=True)
class Request:
    """与节点无关的请求描述.

    Attributes:
        method: HTTP 方法，统一转为大写
        path: 请求路径（可带查询串），总是以 ``/`` 开头
        headers: 请求头
        body: 请求体

    Examples:
        >>> Request("get", "_cat/indices").path
        '/_cat/indices'
    """

    method: str
    path: str = "/"
    headers: HeadersDict = field(default_factory=dict)
    body: bytes | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        if not self.path.startswith("/"):
            object.__setattr__(self, "path", "/" + self.path)

    def target_url(self, address: Address) -> str:
        """返回该请求发往 address 时的完整 URL."""
        return f"{address}{self.path}"


@dataclass
class Response:
    """响应描述.

    Attributes:
        status: HTTP 状态码
        headers: 响应头（大小写不敏感）
        body: 响应体原始字节
    """

    status: int
    headers: HttpHeaders = field(default_factory=HttpHeaders)
    body: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.headers, HttpHeaders):
            self.headers = HttpHeaders(self.headers or {})

    def json(self) -> Any:
        """将响应体解析为 JSON."""
        return json.loads(self.body)
