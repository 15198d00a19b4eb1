"""
配置模块

默认值对应 wxt-dev/examples 仓库的目录结构，
可以通过 pyproject.toml 中的 [tool.examples-metadata] 表覆盖。
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Optional

from examples_metadata.errors import ConfigError


# ============================================================
# 配置常量
# ============================================================

# 不计入依赖索引的包（构建工具链）
DEFAULT_IGNORED_PACKAGES: list[str] = [
    "wxt",
    "typescript",
    "vue-tsc",
    "svelte-check",
    "tslib",
    "@tsconfig/svelte",
]

# 以这些前缀开头的包同样忽略
DEFAULT_IGNORED_PACKAGE_PREFIXES: list[str] = ["@types"]

DEFAULT_BUILD_COMMAND = "pnpm -r build"
DEFAULT_REPO_URL = "https://github.com/wxt-dev/examples/tree/main"

PYPROJECT_TABLE = "examples-metadata"


# ============================================================
# 数据模型
# ============================================================

@dataclass
class MetadataConfig:
    """
    运行配置

    Attributes:
        root: 项目根目录
        examples_dir: 示例目录（相对 root）
        output: 输出文件（相对 root）
        build_command: 构建全部示例的命令
        repo_url: 生成示例 URL 的前缀
        ignored_packages: 忽略的包名
        ignored_package_prefixes: 忽略的包名前缀
        package_json_name: 依赖描述文件名
        readme_name: README 文件名
        manifest_path: 构建产物 manifest 路径（相对示例目录）
        skip_build: 是否跳过构建
    """
    root: Path = field(default_factory=Path.cwd)
    examples_dir: str = "examples"
    output: str = "metadata.json"
    build_command: str = DEFAULT_BUILD_COMMAND
    repo_url: str = DEFAULT_REPO_URL
    ignored_packages: list[str] = field(default_factory=lambda: list(DEFAULT_IGNORED_PACKAGES))
    ignored_package_prefixes: list[str] = field(
        default_factory=lambda: list(DEFAULT_IGNORED_PACKAGE_PREFIXES)
    )
    package_json_name: str = "package.json"
    readme_name: str = "README.md"
    manifest_path: str = ".output/chrome-mv3/manifest.json"
    skip_build: bool = False

    def __post_init__(self) -> None:
        # 示例 URL 由示例目录相对 root 的路径拼接而成
        examples = (self.root / self.examples_dir).resolve()
        if not examples.is_relative_to(self.root.resolve()):
            raise ConfigError(
                f"Examples directory must be inside the project root: {self.examples_dir}"
            )

    @property
    def examples_path(self) -> Path:
        return self.root / self.examples_dir

    @property
    def output_path(self) -> Path:
        return self.root / self.output

    def example_url(self, example_dir: Path) -> str:
        """示例在仓库中的地址"""
        relative = example_dir.relative_to(self.root).as_posix()
        return f"{self.repo_url.rstrip('/')}/{relative}"

    def with_overrides(self, **overrides: Any) -> "MetadataConfig":
        """返回应用了非 None 覆盖值的新配置"""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


# pyproject 中允许的键 -> 字段名
_FILE_KEYS: dict[str, str] = {
    "examples-dir": "examples_dir",
    "output": "output",
    "build-command": "build_command",
    "repo-url": "repo_url",
    "ignored-packages": "ignored_packages",
    "ignored-package-prefixes": "ignored_package_prefixes",
}


def _validate_value(key: str, value: Any) -> Any:
    if key in ("ignored-packages", "ignored-package-prefixes"):
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(f"'{key}' must be a list of strings")
    elif not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string")
    return value


def load_config(root: Optional[Path] = None) -> MetadataConfig:
    """
    加载配置

    读取 root/pyproject.toml 的 [tool.examples-metadata] 表；
    文件或表不存在时使用默认值。

    Raises:
        ConfigError: pyproject.toml 无法解析或包含未知键
    """
    root = (root or Path.cwd()).resolve()
    config = MetadataConfig(root=root)

    pyproject_path = root / "pyproject.toml"
    if not pyproject_path.is_file():
        return config

    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Failed to parse {pyproject_path}: {e}") from e

    table = data.get("tool", {}).get(PYPROJECT_TABLE)
    if table is None:
        return config
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.{PYPROJECT_TABLE}] must be a table")

    overrides: dict[str, Any] = {}
    for key, value in table.items():
        if key not in _FILE_KEYS:
            known = ", ".join(sorted(_FILE_KEYS))
            raise ConfigError(f"Unknown key '{key}' in [tool.{PYPROJECT_TABLE}] (expected one of: {known})")
        overrides[_FILE_KEYS[key]] = _validate_value(key, value)

    return config.with_overrides(**overrides)
