"""Member filtering, default values and output naming."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import AbstractSet, Any, Iterable, List

from .models import Member, MemberMapping

DEFAULT_ENUM_IGNORE = ("CREATED_AT", "UPDATED_AT")

_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")


def to_snake_case(value: str) -> str:
    """Insert ``_`` at each lowercase-to-uppercase boundary.

    Runs of capitals are not split, so ``HTMLParser`` stays ``HTMLParser``.
    """
    return _CASE_BOUNDARY.sub(r"\1_\2", value)


def format_enum_value(name: str) -> str:
    """Derive the value for an enum case that has none: ``UserActive`` -> ``user_active``."""
    return to_snake_case(name).lower()


@dataclass(frozen=True)
class NamingPolicy:
    ignore: AbstractSet[str] = frozenset()
    suffix: str = ""
    synthesize_defaults: bool = False

    def filter(self, members: Iterable[Member]) -> List[Member]:
        return [member for member in members if member.name not in self.ignore]

    def value_for(self, member: Member) -> Any:
        if member.value is None and self.synthesize_defaults:
            return format_enum_value(member.name)
        return member.value

    def output_name(self, short_name: str) -> str:
        return f"{short_name}{self.suffix}"

    def normalize(self, members: Iterable[Member]) -> MemberMapping:
        """Apply the ignore list first, then resolve values, keeping member order."""
        return {member.name: self.value_for(member) for member in self.filter(members)}


__all__ = [
    "DEFAULT_ENUM_IGNORE",
    "NamingPolicy",
    "format_enum_value",
    "to_snake_case",
]
