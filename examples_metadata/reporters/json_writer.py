"""
JSON 写入器 - 输出 metadata.json
"""

import logging
from pathlib import Path

from examples_metadata.core.models import MetadataDocument

logger = logging.getLogger(__name__)


class JsonWriter:
    """JSON 写入器"""

    def __init__(self, output_path: Path):
        self.output_path = output_path

    def write(self, document: MetadataDocument) -> None:
        """整体覆盖写入输出文件"""
        self.output_path.write_text(document.to_json(), encoding="utf-8")
        logger.debug(f"Wrote {len(document.examples)} examples to {self.output_path}")


def write_document(document: MetadataDocument, output_path: Path) -> None:
    JsonWriter(output_path).write(document)
