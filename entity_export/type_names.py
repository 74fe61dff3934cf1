"""Lexical recovery of fully qualified class names from source files.

Files are tokenized, never parsed or executed. The scan is a heuristic: the
first matching ``class`` declaration wins and its name is read from the token
directly after the keyword. Nested or unconventionally written declarations
are not handled.
"""

from __future__ import annotations

import io
import tokenize
from pathlib import Path
from typing import AbstractSet, List, Optional

from .logging import get_logger
from .models import ResolvedType, SourceUnit

DECLARATION_KEYWORD = "class"
NAMESPACE_SEPARATOR = "."

logger = get_logger("type_names")


def module_name_for(path: Path, import_root: Path) -> Optional[str]:
    """Return the dotted module path of ``path`` relative to ``import_root``."""
    try:
        relative = Path(path).resolve().relative_to(Path(import_root).resolve())
    except ValueError:
        return None

    parts = list(relative.with_suffix("").parts)
    if parts and parts[-1] == "__init__":
        parts.pop()
    if not parts or not all(part.isidentifier() for part in parts):
        return None
    return NAMESPACE_SEPARATOR.join(parts)


def extract_type_name(
    source: str,
    namespace: Optional[str],
    base_names: Optional[AbstractSet[str]] = None,
) -> Optional[str]:
    """Return ``namespace.ShortName`` for the first matching declaration.

    With ``base_names`` set, only declarations listing one of those bases (or a
    base whose name ends with ``Enum``) match; later classes are tried when an
    earlier one does not.
    """
    tokens = _tokenize(source)
    if tokens is None:
        return None

    short_name: Optional[str] = None
    for index, token in enumerate(tokens):
        if token.type != tokenize.NAME or token.string != DECLARATION_KEYWORD:
            continue
        if base_names is not None and not _declares_base(tokens, index + 2, base_names):
            continue
        candidate = tokens[index + 1] if index + 1 < len(tokens) else None
        if candidate is not None and candidate.type == tokenize.NAME:
            short_name = candidate.string
        break

    if not namespace or not short_name:
        return None
    return f"{namespace}{NAMESPACE_SEPARATOR}{short_name}"


def _tokenize(source: str) -> Optional[List[tokenize.TokenInfo]]:
    try:
        return list(tokenize.generate_tokens(io.StringIO(source).readline))
    except (tokenize.TokenError, SyntaxError) as exc:
        logger.debug("Tokenizer rejected source: %s", exc)
        return None


def _declares_base(
    tokens: List[tokenize.TokenInfo], start: int, base_names: AbstractSet[str]
) -> bool:
    if start >= len(tokens) or tokens[start].string != "(":
        return False
    depth = 0
    for token in tokens[start:]:
        if token.type == tokenize.OP and token.string in "([{":
            depth += 1
        elif token.type == tokenize.OP and token.string in ")]}":
            depth -= 1
            if depth == 0:
                return False
        elif token.type == tokenize.NAME and depth == 1:
            if token.string in base_names or token.string.endswith("Enum"):
                return True
    return False


class TypeNameExtractor:
    """Resolves source units to class references for one export mode."""

    def __init__(
        self, import_root: Path, base_names: Optional[AbstractSet[str]] = None
    ) -> None:
        self.import_root = Path(import_root)
        self.base_names = base_names

    def resolve(self, unit: SourceUnit) -> Optional[ResolvedType]:
        try:
            source = unit.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Could not read %s: %s", unit.path, exc)
            return None

        namespace = module_name_for(unit.path, self.import_root)
        qualified = extract_type_name(source, namespace, self.base_names)
        if qualified is None:
            return None
        module, _, name = qualified.rpartition(NAMESPACE_SEPARATOR)
        return ResolvedType(module=module, name=name)


__all__ = [
    "DECLARATION_KEYWORD",
    "TypeNameExtractor",
    "extract_type_name",
    "module_name_for",
]
