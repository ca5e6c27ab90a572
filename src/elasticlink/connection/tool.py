"""连接配置校验工具模块.

根据 ClientConfig 与注入的环境变量读取函数，确定客户端实际使用的地址集合。

优先级: 显式地址 > Cloud ID > 环境变量 ELASTICSEARCH_URL > 默认地址

使用示例:
    from elasticlink.connection import ClientConfig, resolve_config_addresses

    addresses = resolve_config_addresses(
        ClientConfig(), env_reader={"ELASTICSEARCH_URL": "http://es:9200"}.get
    )
"""

import logging
import os

from ..address import Address, resolve_addresses, resolve_cloud_id
from ..typing import EnvReader
from .exceptions import ConflictingConfigurationError
from .models import ClientConfig

logger = logging.getLogger(__name__)

ENV_ADDRESS_VARIABLE = "ELASTICSEARCH_URL"
DEFAULT_ADDRESS = "http://localhost:9200"


def addresses_from_environment(env_reader: EnvReader) -> list[str]:
    """读取环境变量中的地址列表.

    环境变量以逗号分隔多个地址，空白项被忽略。

    Args:
        env_reader: 环境变量读取函数

    Returns:
        地址字符串列表，未设置时返回空列表
    """
    value = env_reader(ENV_ADDRESS_VARIABLE) or ""
    return [item.strip() for item in value.split(",") if item.strip()]


def resolve_config_addresses(
    config: ClientConfig,
    env_reader: EnvReader | None = None,
) -> list[Address]:
    """确定客户端使用的地址集合.

    显式地址与 Cloud ID 同时配置时直接报错（不论环境变量是否设置）。

    Args:
        config: 客户端配置
        env_reader: 环境变量读取函数，默认 os.environ.get

    Returns:
        解析后的地址列表

    Raises:
        ConflictingConfigurationError: addresses 与 cloud_id 同时配置时抛出
        InvalidAddressError: 地址不合法时抛出
        MalformedCloudIDError: Cloud ID 格式错误时抛出
        InvalidEncodingError: Cloud ID 编码错误时抛出
    """
    if config.addresses and config.cloud_id:
        raise ConflictingConfigurationError(
            "addresses 与 cloud_id 不能同时配置 (both addresses and cloud_id are set)"
        )

    if config.addresses:
        return resolve_addresses(config.addresses)

    if config.cloud_id:
        return [resolve_cloud_id(config.cloud_id)]

    env_addresses = addresses_from_environment(env_reader or os.environ.get)
    if env_addresses:
        logger.info(f"使用环境变量 {ENV_ADDRESS_VARIABLE} 中的地址: {env_addresses}")
        return resolve_addresses(env_addresses)

    return resolve_addresses([DEFAULT_ADDRESS])
