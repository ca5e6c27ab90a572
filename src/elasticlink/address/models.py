"""地址数据模型定义模块."""

from dataclasses import dataclass

from .exceptions import InvalidAddressError

# 未显式指定端口时各协议使用的默认端口
DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True)
class Address:
    """经过校验的 Elasticsearch 基础地址.

    Attributes:
        scheme: 协议（http / https），不可为空
        host: 主机名或 IP（IPv6 不带方括号），不可为空
        port: 端口，None 表示未显式指定
        path: 路径前缀，不带结尾斜杠，默认为空字符串

    Raises:
        InvalidAddressError: 当 scheme 或 host 为空时抛出

    Examples:
        >>> str(Address(scheme="http", host="localhost", port=9200))
        'http://localhost:9200'
    """

    scheme: str
    host: str
    port: int | None = None
    path: str = ""

    def __post_init__(self) -> None:
        """校验地址字段合法性."""
        if not self.scheme:
            raise InvalidAddressError("地址缺少协议 (missing protocol scheme)")
        if not self.host:
            raise InvalidAddressError("地址缺少主机 (missing host)")

    @property
    def netloc(self) -> str:
        """返回 host[:port] 形式的网络位置."""
        host = f"[{self.host}]" if ":" in self.host else self.host
        if self.port is None:
            return host
        return f"{host}:{self.port}"

    @property
    def effective_port(self) -> int | None:
        """返回实际使用的端口，未指定时按协议取默认端口."""
        if self.port is not None:
            return self.port
        return DEFAULT_PORTS.get(self.scheme)

    def __str__(self) -> str:
        return f"{self.scheme}://{self.netloc}{self.path}"
