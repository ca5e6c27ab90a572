"""连接池模块.

ConnectionPool 持有解析后的地址集合，按轮询策略为每次尝试挑选节点。
"""

from __future__ import annotations

import itertools
import logging
import threading
from collections.abc import Iterable, Iterator

from ..address import Address
from .exceptions import NoEndpointsError

logger = logging.getLogger(__name__)


class ConnectionPool:
    """轮询连接池.

    构造时按首次出现的顺序去重。轮询游标由锁保护，并发调用 next()
    时每次调用恰好推进一次游标。单节点时始终返回该节点。

    Args:
        addresses: 地址列表，去重后不可为空
        persist_cursor: 游标是否跨逻辑请求保持。True 时 cycle() 共享全局游标，
            False 时每次 cycle() 都从第一个节点重新开始

    Raises:
        NoEndpointsError: 当地址列表为空时抛出

    Examples:
        >>> pool = ConnectionPool(resolve_addresses(["http://a:9200", "http://b:9200"]))
        >>> str(pool.next()), str(pool.next())
        ('http://a:9200', 'http://b:9200')
    """

    def __init__(self, addresses: Iterable[Address], persist_cursor: bool = True) -> None:
        urls = tuple(dict.fromkeys(addresses))
        if not urls:
            raise NoEndpointsError("连接池不能为空，请提供至少一个节点地址")
        self._urls = urls
        self._persist_cursor = persist_cursor
        self._cursor = 0
        self._lock = threading.Lock()
        logger.info(f"初始化连接池: {[str(u) for u in urls]}")

    @property
    def persist_cursor(self) -> bool:
        return self._persist_cursor

    def urls(self) -> tuple[Address, ...]:
        """返回连接池中地址的只读快照."""
        return self._urls

    def __len__(self) -> int:
        return len(self._urls)

    def next(self) -> Address:
        """按轮询顺序返回下一个地址."""
        if len(self._urls) == 1:
            return self._urls[0]
        with self._lock:
            address = self._urls[self._cursor]
            self._cursor = (self._cursor + 1) % len(self._urls)
        return address

    def cycle(self) -> Iterator[Address]:
        """返回一次逻辑请求使用的节点迭代器.

        迭代器是无限的，调度器每次尝试取一个节点。
        """
        if self._persist_cursor:
            return iter(self.next, None)
        return itertools.cycle(self._urls)
