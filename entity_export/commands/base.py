"""Base class for export commands."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Tuple

from ..config import ExportConfig
from ..exporter import Exporter
from ..models import ExportOptions
from ..reflection import MemberReflector


class ExportCommand(ABC):
    """Contract for commands that export one kind of backend symbol."""

    name: str = ""
    help: str = ""
    #: Used in "<noun> exported to ..." confirmations.
    noun: str = ""
    #: Used in "<label> directory not found at ..." errors.
    label: str = "Source"
    default_path: str = ""
    default_output: str = ""
    default_suffix: str = ""
    default_ignore: Tuple[str, ...] = ()
    empty_message: str = "Nothing found."
    readonly: bool = False

    @abstractmethod
    def reflector(self) -> MemberReflector:
        """Return the reflector used to read members of discovered types."""

    def configure(self, parser: argparse.ArgumentParser) -> None:
        """Register the command's arguments on its subparser."""
        parser.add_argument(
            "output",
            nargs="?",
            default=None,
            help=f"Output file path for the JavaScript module (default: {self.default_output}).",
        )
        parser.add_argument(
            "--suffix",
            default=None,
            help="Suffix appended to each exported name.",
        )
        parser.add_argument(
            "--typescript",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Write (or with --no-typescript, skip) the TypeScript declaration file.",
        )

    def check_environment(self) -> None:
        """Raise when the running interpreter cannot support this command."""

    def build_options(
        self, args: argparse.Namespace, config: ExportConfig, project_root: Path
    ) -> ExportOptions:
        """Merge CLI arguments, config file values and defaults."""
        section = config.for_command(self.name)
        path = getattr(args, "path", None) or section.path or self.default_path
        output = getattr(args, "output", None) or section.output or self.default_output
        suffix = getattr(args, "suffix", None) or section.suffix or self.default_suffix
        typescript = getattr(args, "typescript", None)
        if typescript is None:
            typescript = bool(section.typescript)
        ignore = tuple(section.ignore) if section.ignore is not None else self.default_ignore

        return ExportOptions(
            source_root=project_root / config.app_dir / path,
            output_path=project_root / output,
            import_root=project_root,
            suffix=suffix,
            emit_declarations=typescript,
            ignore=ignore,
        )

    def exporter(self) -> Exporter:
        return Exporter(self.reflector(), readonly=self.readonly, label=self.label)
