"""``enums`` command: export enum classes."""

from __future__ import annotations

import argparse
import sys

from ..naming import DEFAULT_ENUM_IGNORE
from ..reflection import EnumReflector, MemberReflector
from .base import ExportCommand

MIN_PYTHON = (3, 11)


class UnsupportedRuntime(RuntimeError):
    """Raised when the interpreter is older than the command supports."""


class EnumsCommand(ExportCommand):
    name = "enums"
    help = "Export enums to a JavaScript (and optionally TypeScript) file."
    noun = "Enums"
    label = "Enums"
    default_path = "enums"
    default_output = "resources/js/enums.js"
    default_suffix = ""
    default_ignore = DEFAULT_ENUM_IGNORE
    empty_message = "No enums found."
    readonly = True

    def reflector(self) -> MemberReflector:
        return EnumReflector()

    def configure(self, parser: argparse.ArgumentParser) -> None:
        super().configure(parser)
        parser.add_argument(
            "--path",
            default=None,
            help=f"Enums directory relative to the app directory (default: {self.default_path}).",
        )

    def check_environment(self) -> None:
        if sys.version_info[:2] < MIN_PYTHON:
            required = ".".join(str(part) for part in MIN_PYTHON)
            raise UnsupportedRuntime(f"Python {required} or higher is required to export enums.")
