"""
数据模型定义

包含单个示例的输入文件、解析结果以及最终输出文档。
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

# searchText 各字段之间的分隔符
SEARCH_TEXT_SEPARATOR = "|"


@dataclass
class ExampleArtifacts:
    """
    单个示例的三个输入文件

    Attributes:
        example_dir: 示例目录
        package_json: 解析后的 package.json
        readme_text: README.md 原始文本
        manifest: 解析后的构建产物 manifest.json
    """
    example_dir: Path
    package_json: dict[str, Any]
    readme_text: str
    manifest: dict[str, Any]


@dataclass
class Frontmatter:
    """
    README 头部的 YAML frontmatter

    Attributes:
        name: 示例名称（必填）
        description: 示例描述（可选）
    """
    name: str
    description: Optional[str] = None


@dataclass
class ExampleRecord:
    """
    输出文档中的单个示例记录

    Attributes:
        name: 示例名称
        description: 示例描述，缺省时不输出该字段
        url: 示例源码地址
        search_text: 供搜索使用的拼接文本
    """
    name: str
    description: Optional[str]
    url: str
    search_text: str

    @classmethod
    def build(
        cls,
        frontmatter: Frontmatter,
        url: str,
        packages: list[str],
        permissions: list[str],
        apis: list[str],
    ) -> "ExampleRecord":
        """按固定顺序拼接 searchText 并创建记录"""
        search_text = SEARCH_TEXT_SEPARATOR.join([
            frontmatter.name,
            frontmatter.description or "",
            *packages,
            *permissions,
            *apis,
        ])
        return cls(
            name=frontmatter.name,
            description=frontmatter.description,
            url=url,
            search_text=search_text,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name}
        if self.description is not None:
            data["description"] = self.description
        data["searchText"] = self.search_text
        data["url"] = self.url
        return data


@dataclass
class MetadataDocument:
    """
    最终输出文档

    examples 保持目录发现顺序，三个全局集合在序列化时排序。
    """
    examples: list[ExampleRecord] = field(default_factory=list)
    all_packages: set[str] = field(default_factory=set)
    all_permissions: set[str] = field(default_factory=set)
    all_apis: set[str] = field(default_factory=set)

    def to_dict(self) -> dict[str, Any]:
        return {
            "examples": [example.to_dict() for example in self.examples],
            "allPackages": sorted(self.all_packages),
            "allPermissions": sorted(self.all_permissions),
            "allApis": sorted(self.all_apis),
        }

    def to_json(self) -> str:
        """序列化为带结尾换行的 JSON 字符串"""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2) + "\n"
