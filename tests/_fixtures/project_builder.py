"""Helper utilities for constructing temporary backend projects in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping, Sequence

from entity_export.models import ExportOptions


class ProjectBuilder:
    """Utility for writing Python sources into a throwaway project."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the project."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def options(
        self,
        source: str,
        output: str = "resources/js/out.js",
        *,
        suffix: str = "",
        emit_declarations: bool = False,
        ignore: Sequence[str] = (),
    ) -> ExportOptions:
        """Return export options rooted at this project."""
        return ExportOptions(
            source_root=self.root / source,
            output_path=self.root / output,
            import_root=self.root,
            suffix=suffix,
            emit_declarations=emit_declarations,
            ignore=tuple(ignore),
        )

    def read(self, relative: str) -> str:
        return (self.root / relative).read_text(encoding="utf-8")

    def path(self) -> Path:
        """Return the project root path."""
        return self.root


__all__ = ["ProjectBuilder"]
