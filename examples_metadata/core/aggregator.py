"""
聚合器 - 逐个处理示例并汇总全局索引

处理流程（每个示例）：
1. 加载 package.json / README.md / manifest.json
2. 解析 frontmatter
3. 提取依赖、权限、API
4. 生成 ExampleRecord 并合并到全局集合

示例严格按目录顺序依次处理；状态通过 MetadataDocument 累加器显式传递。
"""

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, Iterable, Optional

from examples_metadata.config import MetadataConfig
from examples_metadata.errors import MissingArtifactError
from examples_metadata.core.extractors import collect_packages, collect_permissions
from examples_metadata.core.frontmatter import parse_frontmatter
from examples_metadata.core.loader import load_artifacts
from examples_metadata.core.models import ExampleRecord, MetadataDocument
from examples_metadata.core.scanner import collect_apis

logger = logging.getLogger(__name__)

ExampleCallback = Callable[[Path], None]
SkipCallback = Callable[[Path, Path], None]


@dataclass
class ExampleResult:
    """
    单个示例的处理结果

    Attributes:
        record: 输出记录
        packages: 过滤后的依赖
        permissions: 请求的权限
        apis: 检测到的 API
    """
    record: ExampleRecord
    packages: list[str] = field(default_factory=list)
    permissions: list[str] = field(default_factory=list)
    apis: list[str] = field(default_factory=list)


def discover_examples(examples_path: Path) -> list[Path]:
    """列出示例目录，按名称排序"""
    return sorted(p for p in examples_path.iterdir() if p.is_dir())


def process_example(example_dir: Path, config: MetadataConfig) -> ExampleResult:
    """
    处理单个示例

    Raises:
        MissingArtifactError: 缺少输入文件
        MalformedArtifactError: 输入文件内容无效（含 FrontmatterError）
        ScanError: 扫描时文件读取失败
    """
    artifacts = load_artifacts(example_dir, config)

    frontmatter = parse_frontmatter(artifacts.readme_text, example_dir / config.readme_name)
    packages = collect_packages(
        artifacts.package_json,
        config.ignored_packages,
        config.ignored_package_prefixes,
        example_dir / config.package_json_name,
    )
    permissions = collect_permissions(artifacts.manifest, example_dir / config.manifest_path)
    apis = collect_apis(example_dir)

    record = ExampleRecord.build(
        frontmatter,
        url=config.example_url(example_dir),
        packages=packages,
        permissions=permissions,
        apis=apis,
    )
    logger.debug(
        f"{example_dir.name}: {len(packages)} packages, "
        f"{len(permissions)} permissions, {len(apis)} APIs"
    )
    return ExampleResult(record=record, packages=packages, permissions=permissions, apis=apis)


def fold_result(document: MetadataDocument, result: ExampleResult) -> MetadataDocument:
    """将单个示例结果合并进文档，返回新文档"""
    return replace(
        document,
        examples=[*document.examples, result.record],
        all_packages=document.all_packages | set(result.packages),
        all_permissions=document.all_permissions | set(result.permissions),
        all_apis=document.all_apis | set(result.apis),
    )


def aggregate(
    example_dirs: Iterable[Path],
    config: MetadataConfig,
    on_example: Optional[ExampleCallback] = None,
    on_skip: Optional[SkipCallback] = None,
) -> MetadataDocument:
    """
    依次处理所有示例并生成文档

    缺少文件的示例被跳过并调用 on_skip，其余错误直接抛出。

    Args:
        example_dirs: 示例目录，按处理顺序
        config: 运行配置
        on_example: 开始处理每个示例时调用
        on_skip: 跳过示例时调用，参数为示例目录和缺失的文件

    Returns:
        MetadataDocument
    """
    document = MetadataDocument()
    for example_dir in example_dirs:
        if on_example:
            on_example(example_dir)
        try:
            result = process_example(example_dir, config)
        except MissingArtifactError as e:
            logger.debug(f"Skipped, not found: {e.path}")
            if on_skip:
                on_skip(example_dir, e.path)
            continue
        document = fold_result(document, result)
    return document
