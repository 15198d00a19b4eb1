"""
异常定义

缺失的文件只会跳过对应示例（MissingArtifactError），
其余错误都会终止整个运行。
"""

from pathlib import Path
from typing import Optional


class MetadataError(Exception):
    """所有元数据生成错误的基类"""


class MissingArtifactError(MetadataError):
    """示例缺少必需文件（package.json / README.md / manifest.json）"""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Not found: {path}")


class MalformedArtifactError(MetadataError):
    """文件存在但内容无法解析"""

    def __init__(self, path: Optional[Path], reason: str):
        self.path = path
        self.reason = reason
        location = f"{path}: " if path is not None else ""
        super().__init__(f"{location}{reason}")


class FrontmatterError(MalformedArtifactError):
    """README frontmatter 缺失、格式错误或缺少 name 字段"""


class ScanError(MetadataError):
    """扫描 API 使用时读取文件失败"""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read {path}: {cause}")


class BuildError(MetadataError):
    """构建命令执行失败"""

    def __init__(self, command: str, exit_code: int, output: str = ""):
        self.command = command
        self.exit_code = exit_code
        self.output = output
        message = f"Build command `{command}` failed with exit code {exit_code}"
        if output:
            message = f"{message}\n{output}"
        super().__init__(message)


class ConfigError(MetadataError):
    """配置无效"""
