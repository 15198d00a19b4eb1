"""
依赖和权限提取

从 package.json 中提取示例使用的第三方包，
从构建产物 manifest.json 中提取请求的扩展权限。
"""

from pathlib import Path
from typing import Any, Iterable, Optional

from examples_metadata.errors import MalformedArtifactError

# package.json 中参与统计的依赖字段（按顺序）
DEPENDENCY_FIELDS = ("dependencies", "devDependencies")


def is_ignored_package(
    name: str,
    ignored_packages: Iterable[str],
    ignored_prefixes: Iterable[str],
) -> bool:
    """判断包是否属于忽略列表或以忽略前缀开头"""
    if name in ignored_packages:
        return True
    return any(name.startswith(prefix) for prefix in ignored_prefixes)


def collect_packages(
    package_json: dict[str, Any],
    ignored_packages: Iterable[str],
    ignored_prefixes: Iterable[str],
    path: Optional[Path] = None,
) -> list[str]:
    """
    提取示例声明的依赖包

    依次合并 dependencies 和 devDependencies 的键，保持首次出现的顺序，
    去掉忽略列表中的包。

    Args:
        package_json: 解析后的 package.json
        ignored_packages: 精确匹配忽略的包名
        ignored_prefixes: 前缀匹配忽略的包名
        path: package.json 路径，仅用于错误信息

    Returns:
        过滤后的包名列表
    """
    ignored = set(ignored_packages)
    prefixes = tuple(ignored_prefixes)
    packages: list[str] = []
    seen: set[str] = set()

    for field_name in DEPENDENCY_FIELDS:
        deps = package_json.get(field_name) or {}
        if not isinstance(deps, dict):
            raise MalformedArtifactError(path, f"'{field_name}' must be an object")
        for name in deps:
            if name in seen or is_ignored_package(name, ignored, prefixes):
                continue
            seen.add(name)
            packages.append(name)

    return packages


def collect_permissions(manifest: dict[str, Any], path: Optional[Path] = None) -> list[str]:
    """
    提取 manifest 中请求的权限

    保持原始顺序，不去重。
    """
    permissions = manifest.get("permissions")
    if permissions is None:
        return []
    if not isinstance(permissions, list) or not all(isinstance(p, str) for p in permissions):
        raise MalformedArtifactError(path, "'permissions' must be an array of strings")
    return list(permissions)
