"""Unit tests for configuration loading."""

import pytest

from examples_metadata.config import (
    DEFAULT_BUILD_COMMAND,
    DEFAULT_IGNORED_PACKAGES,
    MetadataConfig,
    load_config,
)
from examples_metadata.errors import ConfigError


class TestLoadConfig:
    """Test load_config()."""

    def test_defaults_without_pyproject(self, tmp_path):
        config = load_config(tmp_path)

        assert config.root == tmp_path.resolve()
        assert config.examples_path == tmp_path.resolve() / "examples"
        assert config.output_path == tmp_path.resolve() / "metadata.json"
        assert config.build_command == DEFAULT_BUILD_COMMAND
        assert config.ignored_packages == DEFAULT_IGNORED_PACKAGES
        assert config.ignored_package_prefixes == ["@types"]

    def test_pyproject_without_table(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n')

        assert load_config(tmp_path).examples_dir == "examples"

    def test_table_overrides(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text(
            "[tool.examples-metadata]\n"
            'examples-dir = "demos"\n'
            'output = "docs/metadata.json"\n'
            'build-command = "npm run build --workspaces"\n'
            'ignored-packages = ["wxt"]\n'
            'ignored-package-prefixes = ["@types", "@internal"]\n'
        )

        config = load_config(tmp_path)

        assert config.examples_dir == "demos"
        assert config.output == "docs/metadata.json"
        assert config.build_command == "npm run build --workspaces"
        assert config.ignored_packages == ["wxt"]
        assert config.ignored_package_prefixes == ["@types", "@internal"]

    def test_unknown_key_raises(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[tool.examples-metadata]\nexamples = "x"\n')

        with pytest.raises(ConfigError, match="Unknown key 'examples'"):
            load_config(tmp_path)

    def test_wrong_type_raises(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[tool.examples-metadata]\nignored-packages = "wxt"\n')

        with pytest.raises(ConfigError, match="list of strings"):
            load_config(tmp_path)

    def test_invalid_toml_raises(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text("[tool\n")

        with pytest.raises(ConfigError, match="Failed to parse"):
            load_config(tmp_path)


class TestMetadataConfig:
    """Test MetadataConfig helpers."""

    def test_with_overrides_skips_none(self, tmp_path):
        config = MetadataConfig(root=tmp_path)

        updated = config.with_overrides(output="out.json", repo_url=None)

        assert updated.output == "out.json"
        assert updated.repo_url == config.repo_url
        assert config.output == "metadata.json"

    def test_example_url(self, tmp_path):
        config = MetadataConfig(root=tmp_path)

        url = config.example_url(tmp_path / "examples" / "inject-script")

        assert url == "https://github.com/wxt-dev/examples/tree/main/examples/inject-script"


class TestExamplesDirValidation:
    """The examples directory must live under the project root."""

    def test_absolute_outside_root_raises(self, tmp_path):
        with pytest.raises(ConfigError, match="inside the project root"):
            MetadataConfig(root=tmp_path / "project", examples_dir=str(tmp_path / "elsewhere"))

    def test_parent_escape_via_override_raises(self, tmp_path):
        config = MetadataConfig(root=tmp_path)

        with pytest.raises(ConfigError, match="inside the project root"):
            config.with_overrides(examples_dir="../outside")

    def test_filesystem_root_in_pyproject_raises(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[tool.examples-metadata]\nexamples-dir = "/"\n')

        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_absolute_inside_root_is_accepted(self, tmp_path):
        root = tmp_path.resolve()
        config = MetadataConfig(root=root, examples_dir=str(root / "demos"))

        assert config.example_url(root / "demos" / "a") == (
            "https://github.com/wxt-dev/examples/tree/main/demos/a"
        )
