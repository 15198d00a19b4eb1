"""Pytest configuration and fixtures for examples-metadata tests.

Provides builders for on-disk example trees shaped like the
wxt-dev/examples repository.
"""

import json
from pathlib import Path
from typing import Optional

import pytest

from examples_metadata.config import MetadataConfig


def write_example(
    root: Path,
    name: str,
    *,
    title: Optional[str] = None,
    description: Optional[str] = None,
    dependencies: Optional[dict] = None,
    dev_dependencies: Optional[dict] = None,
    permissions: Optional[list] = None,
    sources: Optional[dict] = None,
    package_json: bool = True,
    readme: bool = True,
    manifest: bool = True,
) -> Path:
    """Create examples/<name> with the requested artifacts."""
    example_dir = root / "examples" / name
    example_dir.mkdir(parents=True)

    if package_json:
        data = {"name": name}
        if dependencies is not None:
            data["dependencies"] = dependencies
        if dev_dependencies is not None:
            data["devDependencies"] = dev_dependencies
        (example_dir / "package.json").write_text(json.dumps(data), encoding="utf-8")

    if readme:
        lines = ["---", f"name: {title or name}"]
        if description is not None:
            lines.append(f"description: {description}")
        lines += ["---", "", f"# {title or name}", ""]
        (example_dir / "README.md").write_text("\n".join(lines), encoding="utf-8")

    if manifest:
        manifest_dir = example_dir / ".output" / "chrome-mv3"
        manifest_dir.mkdir(parents=True)
        data = {"manifest_version": 3, "name": name}
        if permissions is not None:
            data["permissions"] = permissions
        (manifest_dir / "manifest.json").write_text(json.dumps(data), encoding="utf-8")

    for relative, content in (sources or {}).items():
        path = example_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    return example_dir


@pytest.fixture
def project_root(tmp_path):
    """Empty project root with an examples/ directory."""
    (tmp_path / "examples").mkdir()
    return tmp_path


@pytest.fixture
def config(project_root):
    """Default configuration rooted at the temporary project."""
    return MetadataConfig(root=project_root, skip_build=True)


@pytest.fixture
def make_example(project_root):
    """Factory fixture: make_example("name", **artifacts) -> example dir."""
    def _make(name: str, **kwargs) -> Path:
        return write_example(project_root, name, **kwargs)
    return _make
