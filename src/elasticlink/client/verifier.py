"""产品校验模块.

确认远端确实是 Elasticsearch。校验通过后结果在客户端生命周期内永久缓存，
校验失败不做缓存，下一次请求会重新校验。
"""

import logging
import re
import threading
from collections.abc import Callable

from ..transport.models import Response
from .exceptions import UnrecognizedProductError

logger = logging.getLogger(__name__)

PRODUCT_HEADER = "X-Elastic-Product"
PRODUCT_NAME = "Elasticsearch"

# 服务端拒绝向未认证调用方暴露身份，这两类响应不参与校验
UNVERIFIABLE_STATUSES = frozenset({401, 403})

EXPECTED_TAGLINE = "You Know, for Search"

_VERSION_PATTERN = re.compile(r"^(\d+)\.(\d+)")

# 根路径信息接口的拉取函数，返回根路径响应
InfoFetcher = Callable[[], Response]


def _parse_version(number: str) -> tuple[int, int] | None:
    match = _VERSION_PATTERN.match(number)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


def check_info_payload(info: dict) -> bool:
    """根据根路径 ``GET /`` 的信息判断是否为 Elasticsearch.

    用于早于 7.14 的版本（这些版本不返回产品标识头）：

    - 6.x: 要求 tagline 正确
    - 7.0 ~ 7.13: 要求 tagline 正确且 build_flavor 为 default
    - 其它版本: 必须依赖产品标识头，返回 False

    Args:
        info: 根路径返回的 JSON 对象

    Returns:
        是否认定为 Elasticsearch
    """
    version_info = info.get("version")
    if not isinstance(version_info, dict):
        return False
    version = _parse_version(str(version_info.get("number", "")))
    if version is None or info.get("tagline") != EXPECTED_TAGLINE:
        return False

    if (6, 0) <= version < (7, 0):
        return True
    if (7, 0) <= version < (7, 14):
        return version_info.get("build_flavor") == "default"
    return False


class ProductVerifier:
    """产品校验器.

    校验状态用 threading.Event 保存：初始未设置，校验通过后置位，
    之后永不复位。并发写入是幂等的单调变化，无需额外加锁。

    Args:
        info_fallback: 响应缺少产品标识头时是否回退到根路径信息校验

    Examples:
        >>> verifier = ProductVerifier()
        >>> verifier.verify(Response(200, {"X-Elastic-Product": "Elasticsearch"}))
        >>> verifier.verified
        True
    """

    def __init__(self, info_fallback: bool = False) -> None:
        self._info_fallback = info_fallback
        self._verified = threading.Event()

    @property
    def verified(self) -> bool:
        """是否已经校验通过."""
        return self._verified.is_set()

    def verify(self, response: Response, fetch_info: InfoFetcher | None = None) -> None:
        """校验响应是否来自 Elasticsearch.

        已经校验通过时直接返回。401/403 响应原样放行，但不置位。

        Args:
            response: 待校验的响应
            fetch_info: 拉取根路径信息的函数，仅在启用 info_fallback 时使用

        Raises:
            UnrecognizedProductError: 产品标识头缺失或不匹配，且回退校验也未通过时抛出
            TransportFailureError: 回退校验拉取根路径信息失败时原样抛出
        """
        if self.verified:
            return
        if response.status in UNVERIFIABLE_STATUSES:
            logger.debug(f"响应状态码 {response.status}，跳过产品校验")
            return

        product = response.headers.get(PRODUCT_HEADER)
        if product == PRODUCT_NAME:
            self._mark_verified()
            return

        if product is None and self._info_fallback and fetch_info is not None:
            if self._verify_info(fetch_info):
                self._mark_verified()
                return

        raise UnrecognizedProductError(
            "客户端发现远端不是受支持的 Elasticsearch 产品 "
            f"({PRODUCT_HEADER}: {product!r})"
        )

    def _verify_info(self, fetch_info: InfoFetcher) -> bool:
        """通过根路径信息回退校验."""
        response = fetch_info()
        if not 200 <= response.status < 300:
            logger.warning(f"根路径信息请求返回状态码 {response.status}，无法回退校验")
            return False
        try:
            info = response.json()
        except (ValueError, UnicodeDecodeError) as e:
            logger.warning(f"根路径信息不是合法的 JSON: {e}")
            return False
        return isinstance(info, dict) and check_info_payload(info)

    def _mark_verified(self) -> None:
        if not self._verified.is_set():
            self._verified.set()
            logger.info("产品校验通过，远端为 Elasticsearch")
