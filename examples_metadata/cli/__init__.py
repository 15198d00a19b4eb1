"""
CLI Layer - 命令行接口层

提供命令行入口。
"""

from examples_metadata.cli.app import app, update, version

__all__ = [
    "app",
    "update",
    "version",
]
