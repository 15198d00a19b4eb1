"""
Core Layer - 核心层

包含文件加载、frontmatter 解析、依赖/权限提取、API 扫描和聚合。
"""

from examples_metadata.errors import (
    MetadataError,
    MissingArtifactError,
    MalformedArtifactError,
    FrontmatterError,
    ScanError,
    BuildError,
    ConfigError,
)
from examples_metadata.core.models import (
    ExampleArtifacts,
    Frontmatter,
    ExampleRecord,
    MetadataDocument,
)
from examples_metadata.core.frontmatter import parse_frontmatter
from examples_metadata.core.extractors import collect_packages, collect_permissions
from examples_metadata.core.loader import load_artifacts
from examples_metadata.core.scanner import collect_apis, detect_apis
from examples_metadata.core.aggregator import (
    ExampleResult,
    aggregate,
    discover_examples,
    fold_result,
    process_example,
)
from examples_metadata.core.builder import run_build

__all__ = [
    # errors
    "MetadataError",
    "MissingArtifactError",
    "MalformedArtifactError",
    "FrontmatterError",
    "ScanError",
    "BuildError",
    "ConfigError",
    # models
    "ExampleArtifacts",
    "Frontmatter",
    "ExampleRecord",
    "MetadataDocument",
    # extraction
    "parse_frontmatter",
    "collect_packages",
    "collect_permissions",
    "load_artifacts",
    "collect_apis",
    "detect_apis",
    # aggregation
    "ExampleResult",
    "aggregate",
    "discover_examples",
    "fold_result",
    "process_example",
    "run_build",
]
