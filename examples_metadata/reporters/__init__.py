"""
Reporters Layer - 输出层

包含 metadata.json 写入器。
"""

from examples_metadata.reporters.json_writer import JsonWriter, write_document

__all__ = [
    "JsonWriter",
    "write_document",
]
