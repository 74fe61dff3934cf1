"""Rendering of the JavaScript module and its TypeScript declarations."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Tuple

from .models import MemberMapping

DECLARATION_SUFFIX = ".d.ts"


def render_module(entries: Mapping[str, MemberMapping]) -> str:
    """Render one ``export const`` statement per entry."""
    content = ""
    for output_name, members in entries.items():
        content += f"export const {output_name} = {_json_literal(members)};\n\n"
    return content


def render_declarations(entries: Mapping[str, MemberMapping], *, readonly: bool = False) -> str:
    """Render one ``export declare const`` block per entry."""
    modifier = "readonly " if readonly else ""
    content = ""
    for output_name, members in entries.items():
        content += f"export declare const {output_name}: {{\n"
        for name, value in members.items():
            content += f"  {modifier}{name}: {declared_type(value)};\n"
        content += "};\n\n"
    return content


def _json_literal(members: MemberMapping) -> str:
    # "/" can only appear inside string literals, so escaping it here is safe.
    return json.dumps(members, indent=4).replace("/", "\\/")


def declared_type(value: Any) -> str:
    # None falls through to "string" as well.
    if isinstance(value, int) and not isinstance(value, bool):
        return "number"
    return "string"


def declaration_path(output_path: Path) -> Path:
    """Return the declaration file path next to ``output_path``."""
    output_path = Path(output_path)
    return output_path.with_name(f"{output_path.stem}{DECLARATION_SUFFIX}")


class CodeEmitter:
    """Renders both output formats for one export mode."""

    def __init__(self, *, readonly: bool = False) -> None:
        self.readonly = readonly

    def render(self, entries: Mapping[str, MemberMapping]) -> Tuple[str, str]:
        return render_module(entries), render_declarations(entries, readonly=self.readonly)


__all__ = [
    "CodeEmitter",
    "DECLARATION_SUFFIX",
    "declaration_path",
    "declared_type",
    "render_declarations",
    "render_module",
]
