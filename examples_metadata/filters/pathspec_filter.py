"""Pathspec-based file filtering for example trees.

Decides which files of an example directory are scanned for API usage.
Patterns use gitignore syntax via the pathspec library.
"""

from pathlib import Path
from typing import Iterable, Iterator

import pathspec


# Files never scanned for API usage
DEFAULT_IGNORE_PATTERNS: list[str] = [
    "node_modules/",
    "package.json",
    # dot-files and dot-directories (.output/, .wxt/, .gitignore, ...)
    ".*",
]


class PathspecFilter:
    """File filter rooted at an example directory."""

    def __init__(self, root: Path, patterns: Iterable[str] = DEFAULT_IGNORE_PATTERNS):
        """
        Initialize the filter.

        Args:
            root: Directory that patterns are relative to
            patterns: Gitignore-style patterns of paths to exclude
        """
        self.root = root
        self._spec = pathspec.PathSpec.from_lines("gitwildmatch", patterns)

    def should_ignore(self, path: Path) -> bool:
        """Check if a file (absolute or relative to root) should be ignored."""
        relative = path.relative_to(self.root) if path.is_absolute() else path
        return self._spec.match_file(relative.as_posix())

    def _walk(self, directory: Path) -> Iterator[Path]:
        for entry in sorted(directory.iterdir()):
            relative = entry.relative_to(self.root)
            if entry.is_dir():
                # directory patterns only match with a trailing slash
                if not self._spec.match_file(f"{relative.as_posix()}/"):
                    yield from self._walk(entry)
            elif entry.is_file() and not self._spec.match_file(relative.as_posix()):
                yield entry

    def iter_files(self) -> Iterator[Path]:
        """Yield every non-ignored file under root, depth-first in name order."""
        yield from self._walk(self.root)
