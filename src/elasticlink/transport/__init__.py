"""传输模块 - 请求/响应模型与可插拔传输能力.

主要组件:
    - Request / Response: 请求与响应描述
    - Transport: 传输能力协议
    - ElasticHttpTransport: 基于 elastic_transport 的默认 HTTP 传输
"""

from .base import Transport
from .exceptions import TransportFailureError
from .http import ElasticHttpTransport
from .models import Request, Response

__all__ = [
    "Request",
    "Response",
    "Transport",
    "ElasticHttpTransport",
    "TransportFailureError",
]
