"""
Frontmatter 解析器 - 提取 README 头部的 name 和 description

README 约定以如下格式开头：

    ---
    name: Inject Script
    description: Inject a script into the page's main world
    ---

第一个和第二个分隔符之间的内容按 YAML 解析。
"""

import re
from pathlib import Path
from typing import Any, Optional

import yaml

from examples_metadata.errors import FrontmatterError
from examples_metadata.core.models import Frontmatter

FRONTMATTER_DELIMITER = "---"

_BOOL_TAG = "tag:yaml.org,2002:bool"
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class FrontmatterLoader(yaml.SafeLoader):
    """
    按 YAML 1.2 core schema 解析标量

    只有 true/false 是布尔值，yes/no/on/off 和日期保持字符串。
    """


FrontmatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in (_BOOL_TAG, _TIMESTAMP_TAG)]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
FrontmatterLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def extract_frontmatter_block(text: str, path: Optional[Path] = None) -> str:
    """返回第一对分隔符之间的文本"""
    parts = text.split(FRONTMATTER_DELIMITER, 2)
    if len(parts) < 3:
        raise FrontmatterError(path, f"frontmatter delimiter '{FRONTMATTER_DELIMITER}' not found")
    return parts[1].strip()


def parse_frontmatter(text: str, path: Optional[Path] = None) -> Frontmatter:
    """
    解析 README frontmatter

    Args:
        text: README 全文
        path: README 路径，仅用于错误信息

    Returns:
        Frontmatter 对象

    Raises:
        FrontmatterError: 分隔符缺失、YAML 无效或缺少 name
    """
    block = extract_frontmatter_block(text, path)

    try:
        data: Any = yaml.load(block, Loader=FrontmatterLoader)
    except yaml.YAMLError as e:
        raise FrontmatterError(path, f"invalid YAML frontmatter: {e}") from e

    if not isinstance(data, dict):
        raise FrontmatterError(path, "frontmatter must be a mapping")

    name = data.get("name")
    if name is None:
        raise FrontmatterError(path, "frontmatter is missing required field 'name'")
    if not isinstance(name, str):
        raise FrontmatterError(path, "frontmatter field 'name' must be a string")

    description = data.get("description")
    if description is not None and not isinstance(description, str):
        raise FrontmatterError(path, "frontmatter field 'description' must be a string")

    return Frontmatter(name=name, description=description)
