"""Export command implementations and the command registry."""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Dict, List

from .base import ExportCommand
from .constants import ConstantsCommand
from .enums import EnumsCommand, UnsupportedRuntime

_ENTRY_POINT_GROUP = "entity_export.commands"

_BUILTIN_COMMANDS: Dict[str, Callable[[], ExportCommand]] = {
    "enums": EnumsCommand,
    "constants": ConstantsCommand,
}


def discover_commands() -> List[ExportCommand]:
    """Return the built-in commands followed by plugin commands.

    Plugins register an ``ExportCommand`` subclass under the
    ``entity_export.commands`` entry-point group. A plugin whose command name
    is already taken is ignored.
    """
    commands = [factory() for factory in _BUILTIN_COMMANDS.values()]
    names = {command.name for command in commands}

    for entry in metadata.entry_points().select(group=_ENTRY_POINT_GROUP):
        try:
            loaded = entry.load()
        except Exception as exc:
            raise RuntimeError(f"Failed to load command entry point '{entry.name}': {exc}") from exc
        if not (isinstance(loaded, type) and issubclass(loaded, ExportCommand)):
            raise TypeError(f"Command entry point '{entry.name}' is not an ExportCommand subclass")
        command = loaded()
        if command.name in names:
            continue
        commands.append(command)
        names.add(command.name)

    return commands


__all__ = [
    "ConstantsCommand",
    "EnumsCommand",
    "ExportCommand",
    "UnsupportedRuntime",
    "discover_commands",
]
