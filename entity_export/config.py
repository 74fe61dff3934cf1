"""Configuration loading for entity-export (.entity-export.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".entity-export.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class CommandConfig:
    """Per-command overrides from .entity-export.yml."""

    path: Optional[str] = None
    output: Optional[str] = None
    suffix: Optional[str] = None
    typescript: Optional[bool] = None
    ignore: Optional[List[str]] = None


@dataclass
class ExportConfig:
    """Represents the settings defined in .entity-export.yml."""

    root: Path
    app_dir: str = "app"
    commands: Dict[str, CommandConfig] = field(default_factory=dict)

    def for_command(self, name: str) -> CommandConfig:
        """Return the section for ``name``, or an empty one when absent."""
        return self.commands.get(name) or CommandConfig()


def load_config(config_path: Path) -> ExportConfig:
    """Load configuration from disk.

    ``config_path`` may be the project directory or the file itself. A missing
    file yields the defaults.
    """
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ExportConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    app_dir = _as_str(data.get("app_dir")) or "app"

    commands: Dict[str, CommandConfig] = {}
    for name, section in data.items():
        if name == "app_dir":
            continue
        section_data = _as_dict(section)
        if not section_data:
            continue
        commands[str(name)] = CommandConfig(
            path=_as_str(section_data.get("path")),
            output=_as_str(section_data.get("output")),
            suffix=_as_str(section_data.get("suffix")),
            typescript=_as_bool(section_data.get("typescript")),
            ignore=_as_str_list(section_data["ignore"]) if "ignore" in section_data else None,
        )

    return ExportConfig(root=root, app_dir=app_dir, commands=commands)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
