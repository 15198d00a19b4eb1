"""
Scanner 模块 - 扫描示例源码提取扩展 API 使用

- patterns.py: 正则表达式模式
- core.py: 主扫描函数
"""

from examples_metadata.core.scanner.patterns import (
    API_ROOTS,
    API_USAGE_PATTERN,
    LISTENER_SUFFIX,
)
from examples_metadata.core.scanner.core import (
    collect_apis,
    detect_apis,
    detect_apis_in_file,
    normalize_api,
)

__all__ = [
    # Patterns
    "API_ROOTS",
    "API_USAGE_PATTERN",
    "LISTENER_SUFFIX",
    # Core
    "collect_apis",
    "detect_apis",
    "detect_apis_in_file",
    "normalize_api",
]
