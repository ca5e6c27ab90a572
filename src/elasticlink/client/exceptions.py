"""客户端异常定义模块."""

from ..exceptions import ElasticLinkError


class ClientError(ElasticLinkError):
    """客户端基础异常类."""

    pass


class UnrecognizedProductError(ClientError):
    """产品校验失败异常.

    当响应缺少 ``X-Elastic-Product`` 头或其值不是 ``Elasticsearch`` 时抛出，
    表示远端不是真正的 Elasticsearch，响应不可信。
    """

    pass


class RetriesExhaustedError(ClientError):
    """重试次数耗尽异常.

    所有尝试都因传输失败而结束时抛出，last_error 为最后一次失败。

    Attributes:
        attempts: 实际尝试次数
        last_error: 最后一次尝试的异常
    """

    def __init__(self, attempts: int, last_error: Exception):
        super().__init__(f"请求在 {attempts} 次尝试后仍然失败: {last_error}")
        self.attempts = attempts
        self.last_error = last_error


class MetricsDisabledError(ClientError):
    """指标未启用异常.

    当客户端未开启 enable_metrics 却读取指标时抛出。
    """

    pass
