"""Unit tests for the build step."""

from unittest.mock import Mock, patch

import pytest

from examples_metadata.config import MetadataConfig
from examples_metadata.core.builder import run_build
from examples_metadata.errors import BuildError


class TestRunBuild:
    """Test run_build()."""

    def test_runs_command_in_root(self, tmp_path):
        config = MetadataConfig(root=tmp_path)

        with patch("examples_metadata.core.builder.subprocess.run") as mock_run:
            mock_run.return_value = Mock(returncode=0, stdout="ok", stderr="")
            run_build(config)

        args, kwargs = mock_run.call_args
        assert args[0] == ["pnpm", "-r", "build"]
        assert kwargs["cwd"] == tmp_path

    def test_failure_raises(self, tmp_path):
        config = MetadataConfig(root=tmp_path)

        with patch("examples_metadata.core.builder.subprocess.run") as mock_run:
            mock_run.return_value = Mock(returncode=2, stdout="building\n", stderr="error TS2304")
            with pytest.raises(BuildError) as exc_info:
                run_build(config)

        assert exc_info.value.exit_code == 2
        assert exc_info.value.command == "pnpm -r build"
        assert "error TS2304" in exc_info.value.output

    def test_missing_executable_raises(self, tmp_path):
        config = MetadataConfig(root=tmp_path, build_command="definitely-not-a-real-binary build")

        with patch("examples_metadata.core.builder.subprocess.run", side_effect=FileNotFoundError("nope")):
            with pytest.raises(BuildError) as exc_info:
                run_build(config)

        assert exc_info.value.exit_code == -1
