"""地址解析工具模块.

提供两类解析能力：

- resolve_addresses / parse_address: 将用户提供的地址字符串解析为 Address
- resolve_cloud_id: 将 Cloud ID 解码为派生出的 https 地址

使用示例:
    from elasticlink.address import resolve_addresses, resolve_cloud_id

    addresses = resolve_addresses(["http://localhost:9200/"])
    cloud = resolve_cloud_id("name:" + encoded)
"""

import base64
import binascii
import re
from collections.abc import Sequence
from urllib.parse import urlsplit

from .exceptions import InvalidAddressError, InvalidEncodingError, MalformedCloudIDError
from .models import Address

# 标准 base64 字母表，要求补齐
_BASE64_PATTERN = re.compile(r"^[A-Za-z0-9+/]*={0,2}$")

CLOUD_ID_SCHEME = "https"


def parse_address(raw: str) -> Address:
    """解析单个地址字符串.

    去掉路径末尾的所有斜杠（``http://h/`` 与 ``http://h//`` 都会变为
    ``http://h``），其余路径后缀原样保留。

    Args:
        raw: 地址字符串，例如 ``http://localhost:9200``

    Returns:
        解析后的 Address

    Raises:
        InvalidAddressError: 缺少协议或主机、端口不合法、URL 语法错误，
            或地址中带有查询串/片段时抛出
    """
    try:
        parts = urlsplit(raw.strip())
        port = parts.port
    except ValueError as e:
        raise InvalidAddressError(f"无法解析地址 {raw!r}: {e}") from e

    if not parts.scheme:
        raise InvalidAddressError(f"地址 {raw!r} 缺少协议 (missing protocol scheme)")
    if not parts.hostname:
        raise InvalidAddressError(f"地址 {raw!r} 缺少主机 (missing host)")
    if parts.query or parts.fragment:
        raise InvalidAddressError(f"地址 {raw!r} 不能包含查询串或片段")

    return Address(
        scheme=parts.scheme.lower(),
        host=parts.hostname,
        port=port,
        path=parts.path.rstrip("/"),
    )


def resolve_addresses(raw_addresses: Sequence[str]) -> list[Address]:
    """批量解析地址字符串.

    输出顺序与输入一致，此处不做去重（去重在连接池构造时完成）。

    Args:
        raw_addresses: 地址字符串列表

    Returns:
        Address 列表

    Raises:
        InvalidAddressError: 任一地址不合法时抛出
    """
    return [parse_address(raw) for raw in raw_addresses]


def _decode_cloud_payload(payload: str) -> str:
    """解码 Cloud ID 的 base64 负载."""
    if len(payload) % 4 != 0 or not _BASE64_PATTERN.match(payload):
        raise InvalidEncodingError(
            f"Cloud ID 负载不是合法的 base64 编码 (illegal base64 data): {payload!r}"
        )
    try:
        return base64.b64decode(payload, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise InvalidEncodingError(
            f"Cloud ID 负载不是合法的 base64 编码 (illegal base64 data): {e}"
        ) from e


def resolve_cloud_id(cloud_id: str) -> Address:
    """将 Cloud ID 解码为派生地址.

    Cloud ID 格式为 ``name:base64(host[:port]$es_uuid[$kibana_uuid])``，
    派生地址为 ``https://{es_uuid}.{host}[:{port}]``。kibana 段可以缺省，
    解码后直接忽略。

    Args:
        cloud_id: Cloud ID 字符串

    Returns:
        派生出的 Address

    Raises:
        MalformedCloudIDError: 缺少 ``:``、段数不足两段或主机/uuid 为空时抛出
        InvalidEncodingError: base64 解码失败时抛出

    Examples:
        >>> str(resolve_cloud_id("name:aG9zdCRlc191dWlkJGtpYmFuYV91dWlk"))
        'https://es_uuid.host'
    """
    _name, sep, payload = cloud_id.partition(":")
    if not sep:
        raise MalformedCloudIDError(
            f"Cloud ID 格式错误 (unexpected format): {cloud_id!r}，期望 'name:base64'"
        )

    segments = _decode_cloud_payload(payload).split("$")
    if len(segments) < 2:
        raise MalformedCloudIDError(
            f"Cloud ID 解码后的内容段数不足 (invalid encoded value): {segments}"
        )

    host_segment, es_uuid = segments[0], segments[1]
    host, _, port_text = host_segment.partition(":")
    if not host or not es_uuid:
        raise MalformedCloudIDError(
            f"Cloud ID 中的主机或 Elasticsearch uuid 为空: {segments}"
        )

    port: int | None = None
    if port_text:
        if not port_text.isdigit():
            raise MalformedCloudIDError(f"Cloud ID 中的端口不合法: {port_text!r}")
        port = int(port_text)

    return Address(scheme=CLOUD_ID_SCHEME, host=f"{es_uuid}.{host}", port=port)
