"""Runtime reflection over exported types."""

from __future__ import annotations

import enum
import importlib
import re
import sys
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from types import ModuleType
from typing import AbstractSet, Any, Iterator, List, Optional

from .logging import get_logger
from .models import Member, ResolvedType

logger = get_logger("reflection")

_CONSTANT_NAME = re.compile(r"^[A-Z][A-Z0-9_]*$")


@contextmanager
def importable_from(root: Path) -> Iterator[None]:
    """Make modules below ``root`` importable for the duration of the block.

    Modules first imported from ``root`` inside the block are evicted
    afterwards so the next run reflects the files as they are on disk.
    """
    root_path = Path(root).resolve()
    saved_path = list(sys.path)
    preloaded = set(sys.modules)
    sys.path.insert(0, str(root_path))
    importlib.invalidate_caches()
    try:
        yield
    finally:
        # Decide before deleting: a namespace package's __path__ is recomputed
        # through its parent, which must still be in sys.modules.
        evicted = [
            name
            for name, module in list(sys.modules.items())
            if name not in preloaded and module is not None and _module_under(module, root_path)
        ]
        for name in evicted:
            sys.modules.pop(name, None)
        sys.path[:] = saved_path


def _module_under(module: ModuleType, root: Path) -> bool:
    locations: List[str] = []
    file_name = getattr(module, "__file__", None)
    if file_name:
        locations.append(file_name)
    locations.extend(str(entry) for entry in list(getattr(module, "__path__", None) or []))
    for location in locations:
        try:
            Path(location).resolve().relative_to(root)
        except (ValueError, OSError):
            continue
        return True
    return False


def load_type(resolved: ResolvedType) -> Optional[Any]:
    """Import the module of ``resolved`` and return the named attribute."""
    try:
        module = importlib.import_module(resolved.module)
    except Exception as exc:  # any import-time failure skips the type
        logger.debug("Failed to import %s: %s", resolved.module, exc)
        return None
    obj = getattr(module, resolved.name, None)
    if obj is None:
        logger.debug("%s not found in module %s", resolved.name, resolved.module)
    return obj


class MemberReflector(ABC):
    """Contract for reflectors that list the exportable members of a type."""

    #: Base class names a declaration must list to be considered, or None for any class.
    base_names: Optional[AbstractSet[str]] = None
    #: Whether members without a backing value get a synthesized one.
    synthesize_defaults: bool = False

    @abstractmethod
    def accepts(self, obj: Any) -> bool:
        """Return True when ``obj`` is a type this reflector can read."""

    @abstractmethod
    def members(self, cls: type) -> List[Member]:
        """Return members in reflection order."""


class EnumReflector(MemberReflector):
    """Reads the cases of ``enum.Enum`` subclasses."""

    base_names = frozenset(
        {
            "Enum",
            "IntEnum",
            "StrEnum",
            "Flag",
            "IntFlag",
            "ReprEnum",
            "Choices",
            "TextChoices",
            "IntegerChoices",
        }
    )
    synthesize_defaults = True

    def accepts(self, obj: Any) -> bool:
        return isinstance(obj, type) and issubclass(obj, enum.Enum)

    def members(self, cls: type) -> List[Member]:
        # __members__ keeps aliases and zero or composite Flag members,
        # which iterating the class would drop.
        return [
            Member(name=name, value=_backing_value(case))
            for name, case in cls.__members__.items()  # type: ignore[attr-defined]
        ]


def _backing_value(case: enum.Enum) -> Optional[Any]:
    value = case.value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return int(value)
    if isinstance(value, str):
        return str(value)
    return None


class ConstantsReflector(MemberReflector):
    """Reads UPPER_CASE class constants, including inherited ones."""

    def accepts(self, obj: Any) -> bool:
        return isinstance(obj, type)

    def members(self, cls: type) -> List[Member]:
        found: List[Member] = []
        seen = set()
        for klass in cls.__mro__:
            if klass is object:
                continue
            for name, value in vars(klass).items():
                if name in seen or not _CONSTANT_NAME.match(name):
                    continue
                if not _is_exportable(value):
                    continue
                seen.add(name)
                found.append(Member(name=name, value=_plain(value)))
        return found


def _is_exportable(value: Any) -> bool:
    if value is None or isinstance(value, (str, int, float, bool)):
        return not isinstance(value, enum.Enum)
    if isinstance(value, (list, tuple)):
        return all(_is_exportable(item) for item in value)
    if isinstance(value, dict):
        return all(isinstance(key, str) and _is_exportable(item) for key, item in value.items())
    return False


def _plain(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_plain(item) for item in value]
    if isinstance(value, list):
        return [_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    return value


__all__ = [
    "ConstantsReflector",
    "EnumReflector",
    "MemberReflector",
    "importable_from",
    "load_type",
]
