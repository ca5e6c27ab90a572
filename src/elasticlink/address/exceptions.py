"""地址解析异常定义模块."""

from ..exceptions import ElasticLinkError


class AddressError(ElasticLinkError):
    """地址解析基础异常类."""

    pass


class InvalidAddressError(AddressError):
    """地址格式异常.

    当地址字符串缺少协议、缺少主机、端口不合法或带有查询串/片段时抛出。
    """

    pass


class MalformedCloudIDError(AddressError):
    """Cloud ID 格式异常.

    当 Cloud ID 缺少 ``:`` 分隔符，或解码后的内容不足两段时抛出。
    """

    pass


class InvalidEncodingError(AddressError):
    """Cloud ID 编码异常.

    当 Cloud ID 的负载部分不是合法的 base64 编码时抛出。
    """

    pass
