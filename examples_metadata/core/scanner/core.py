"""
核心扫描函数

对示例目录中的每个文件做词法扫描，提取 browser.* / chrome.* API 引用。
这是尽力而为的文本匹配，不是语法分析：字符串和注释中的引用同样会被匹配。
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from examples_metadata.errors import ScanError
from examples_metadata.core.scanner.patterns import API_USAGE_PATTERN, LISTENER_SUFFIX
from examples_metadata.filters.pathspec_filter import PathspecFilter

logger = logging.getLogger(__name__)

# 进度回调类型
ProgressCallback = Callable[[Path], None]


def normalize_api(chain: str) -> str:
    """去掉结尾的 .addListener"""
    return chain.removesuffix(LISTENER_SUFFIX)


def detect_apis(content: str) -> list[str]:
    """从文本中提取 API 引用，按首次出现顺序去重"""
    apis: dict[str, None] = {}
    for match in API_USAGE_PATTERN.finditer(content):
        apis.setdefault(normalize_api(match.group(1)), None)
    return list(apis)


def detect_apis_in_file(file_path: Path) -> list[str]:
    """
    读取单个文件并提取 API 引用

    按 UTF-8 读取，无效字节替换为 U+FFFD，图标等二进制文件也能扫描。

    Raises:
        ScanError: 文件无法读取
    """
    try:
        content = file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ScanError(file_path, e) from e
    return detect_apis(content)


def collect_apis(
    example_dir: Path,
    path_filter: Optional[PathspecFilter] = None,
    on_file: Optional[ProgressCallback] = None,
) -> list[str]:
    """
    扫描示例目录中的所有文件

    跳过 node_modules、package.json 以及以点开头的文件和目录。

    Args:
        example_dir: 示例目录
        path_filter: 文件过滤器（可选，如果为 None 则自动创建）
        on_file: 每扫描一个文件时调用

    Returns:
        示例中出现的 API，按首次出现顺序去重
    """
    if path_filter is None:
        path_filter = PathspecFilter(example_dir)

    apis: dict[str, None] = {}
    for file_path in path_filter.iter_files():
        if on_file:
            on_file(file_path)
        found = detect_apis_in_file(file_path)
        if found:
            logger.debug(f"{file_path}: {len(found)} API references")
        for api in found:
            apis.setdefault(api, None)
    return list(apis)
