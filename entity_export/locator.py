"""Source file discovery for export runs."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

from .models import SourceUnit

SOURCE_EXTENSION = ".py"

_EXCLUDED_DIRS = {
    "__pycache__",
    ".pytest_cache",
    ".mypy_cache",
}


class DirectoryNotFound(FileNotFoundError):
    """Raised when a source root is missing or is not a directory."""

    def __init__(self, path: Path, label: str = "Source") -> None:
        super().__init__(f"{label} directory not found at {path}")
        self.path = path


def iter_source_files(
    root: Path, extension: str = SOURCE_EXTENSION, *, label: str = "Source"
) -> Iterator[SourceUnit]:
    """Return a lazy iterator over every ``extension`` file below ``root``.

    The root is validated immediately so a missing directory fails before any
    file is yielded.
    """
    root_path = Path(root).expanduser()
    if not root_path.is_dir():
        raise DirectoryNotFound(root_path, label)
    return _walk(root_path.resolve(), extension)


def _walk(root: Path, extension: str) -> Iterator[SourceUnit]:
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(
            name for name in dirnames if name not in _EXCLUDED_DIRS and not name.startswith(".")
        )
        current_dir = Path(dirpath)
        for filename in sorted(filenames):
            path = current_dir / filename
            if path.suffix != extension or not path.is_file():
                continue
            yield SourceUnit(path=path.resolve(), extension=path.suffix)


__all__ = ["DirectoryNotFound", "SOURCE_EXTENSION", "iter_source_files"]
