"""地址解析模块 - 将地址字符串与 Cloud ID 解析为经过校验的基础地址.

主要组件:
    - Address: 基础地址模型
    - resolve_addresses: 批量解析地址字符串
    - resolve_cloud_id: 解码 Cloud ID

使用示例:
    from elasticlink.address import resolve_addresses

    addresses = resolve_addresses(["http://localhost:9200"])
"""

from .exceptions import (
    AddressError,
    InvalidAddressError,
    InvalidEncodingError,
    MalformedCloudIDError,
)
from .models import DEFAULT_PORTS, Address
from .tool import parse_address, resolve_addresses, resolve_cloud_id

__all__ = [
    # 模型
    "Address",
    "DEFAULT_PORTS",
    # 解析函数
    "parse_address",
    "resolve_addresses",
    "resolve_cloud_id",
    # 异常
    "AddressError",
    "InvalidAddressError",
    "MalformedCloudIDError",
    "InvalidEncodingError",
]
