"""
示例文件加载器

读取每个示例的 package.json、README.md 和构建产物 manifest.json。
文件缺失时抛出 MissingArtifactError（由调用方跳过该示例），
JSON 无效时抛出 MalformedArtifactError（终止运行）。
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from examples_metadata.config import MetadataConfig
from examples_metadata.errors import MalformedArtifactError, MissingArtifactError
from examples_metadata.core.models import ExampleArtifacts

logger = logging.getLogger(__name__)


def read_optional_text(path: Path) -> Optional[str]:
    """
    读取 UTF-8 文本，无法读取时返回 None

    无效字节替换为 U+FFFD；不存在、是目录或无权限都视为缺失。
    """
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug(f"Cannot read {path}: {e}")
        return None


def read_required_text(path: Path) -> str:
    text = read_optional_text(path)
    if text is None:
        raise MissingArtifactError(path)
    return text


def parse_json_object(text: str, path: Path) -> dict[str, Any]:
    """解析 JSON 对象"""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedArtifactError(path, f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedArtifactError(path, "expected a JSON object")
    return data


def load_artifacts(example_dir: Path, config: MetadataConfig) -> ExampleArtifacts:
    """
    加载示例的全部输入文件

    按 package.json、README.md、manifest.json 的顺序读取，
    遇到第一个缺失的文件即停止。

    Args:
        example_dir: 示例目录
        config: 运行配置（文件名）

    Returns:
        ExampleArtifacts

    Raises:
        MissingArtifactError: 任一文件不存在
        MalformedArtifactError: package.json 或 manifest.json 不是合法的 JSON 对象
    """
    package_json_path = example_dir / config.package_json_name
    package_json = parse_json_object(read_required_text(package_json_path), package_json_path)

    readme_path = example_dir / config.readme_name
    readme_text = read_required_text(readme_path)

    manifest_path = example_dir / config.manifest_path
    manifest = parse_json_object(read_required_text(manifest_path), manifest_path)

    logger.debug(f"Loaded artifacts for {example_dir}")
    return ExampleArtifacts(
        example_dir=example_dir,
        package_json=package_json,
        readme_text=readme_text,
        manifest=manifest,
    )
