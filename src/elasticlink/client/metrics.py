"""客户端指标统计模块."""

import threading
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum


class MetricEvent(Enum):
    """指标事件枚举.

    Attributes:
        REQUEST: 一次逻辑请求
        RETRY: 一次重试（首次尝试之外的每次尝试）
        FAILURE: 一次以异常结束的逻辑请求
    """

    REQUEST = "request"
    RETRY = "retry"
    FAILURE = "failure"


@dataclass(frozen=True)
class MetricsSnapshot:
    """指标快照.

    Attributes:
        requests: 逻辑请求数
        retries: 重试次数
        failures: 失败次数
        responses: 按状态码统计的响应数
    """

    requests: int = 0
    retries: int = 0
    failures: int = 0
    responses: dict[int, int] = field(default_factory=dict)

    def __str__(self) -> str:
        return (
            f"requests={self.requests} retries={self.retries} "
            f"failures={self.failures} responses={self.responses}"
        )


class Metrics:
    """线程安全的指标计数器.

    计数只增不减，不提供重置操作。

    Examples:
        >>> metrics = Metrics()
        >>> metrics.record(MetricEvent.REQUEST)
        >>> metrics.snapshot().requests
        1
    """

    def __init__(self) -> None:
        self._counts: Counter[MetricEvent] = Counter()
        self._responses: Counter[int] = Counter()
        self._lock = threading.Lock()

    def record(self, event: MetricEvent, count: int = 1) -> None:
        """记录指标事件."""
        if count < 0:
            raise ValueError(f"count 必须 >= 0，当前值: {count}")
        with self._lock:
            self._counts[event] += count

    def record_response(self, status: int) -> None:
        """记录一次响应的状态码."""
        with self._lock:
            self._responses[status] += 1

    def snapshot(self) -> MetricsSnapshot:
        """返回当前指标的快照."""
        with self._lock:
            return MetricsSnapshot(
                requests=self._counts[MetricEvent.REQUEST],
                retries=self._counts[MetricEvent.RETRY],
                failures=self._counts[MetricEvent.FAILURE],
                responses=dict(self._responses),
            )
