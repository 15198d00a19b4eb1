"""
构建步骤 - 在处理示例前构建全部扩展

构建失败会终止运行，此时不处理任何示例。
"""

import logging
import shlex
import subprocess

from examples_metadata.config import MetadataConfig
from examples_metadata.errors import BuildError

logger = logging.getLogger(__name__)

# 错误信息中保留的输出长度
OUTPUT_TAIL_CHARS = 4000


def run_build(config: MetadataConfig) -> None:
    """
    在项目根目录执行构建命令

    Raises:
        BuildError: 命令无法启动或以非零状态退出
    """
    command = config.build_command
    logger.debug(f"Running build command: {command} (cwd={config.root})")

    try:
        result = subprocess.run(
            shlex.split(command),
            cwd=config.root,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        raise BuildError(command, -1, str(e)) from e

    if result.returncode != 0:
        output = (result.stdout + result.stderr).strip()
        raise BuildError(command, result.returncode, output[-OUTPUT_TAIL_CHARS:])
