"""elasticlink 类型定义模块."""

from collections.abc import Callable
from typing import Dict, Optional

# 请求/响应头字典类型
HeadersDict = Dict[str, str]

# 环境变量读取函数类型
# 格式: env_reader(变量名) -> 变量值或 None
EnvReader = Callable[[str], Optional[str]]

# 重试退避函数类型
# 格式: backoff(第几次重试，从 1 开始) -> 等待秒数
BackoffFunc = Callable[[int], float]
