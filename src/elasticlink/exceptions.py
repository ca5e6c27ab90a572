"""elasticlink 异常定义模块."""


class ElasticLinkError(Exception):
    """elasticlink 基础异常类.

    所有子模块（地址解析、连接配置、传输、客户端）的异常均继承自该类，
    调用方可以统一捕获。
    """

    pass
