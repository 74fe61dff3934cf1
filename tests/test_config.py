"""Tests for entity_export.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from entity_export.config import CommandConfig, ConfigError, ExportConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, ExportConfig)
    assert config.root == tmp_path.resolve()
    assert config.app_dir == "app"
    assert config.commands == {}
    assert config.for_command("enums") == CommandConfig()


def test_load_config_parses_command_sections(tmp_path: Path) -> None:
    (tmp_path / ".entity-export.yml").write_text(
        """
app_dir: backend
enums:
  path: choices
  output: frontend/src/enums.js
  suffix: ""
  typescript: true
  ignore: [CREATED_AT]
constants:
  suffix: Const
  typescript: "no"
""",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.app_dir == "backend"
    enums = config.for_command("enums")
    assert enums.path == "choices"
    assert enums.output == "frontend/src/enums.js"
    assert enums.suffix == ""
    assert enums.typescript is True
    assert enums.ignore == ["CREATED_AT"]

    constants = config.for_command("constants")
    assert constants.suffix == "Const"
    assert constants.typescript is False
    assert constants.ignore is None
    assert constants.path is None


def test_load_config_accepts_explicit_file(tmp_path: Path) -> None:
    config_file = tmp_path / "export.yml"
    config_file.write_text("enums:\n  ignore: []\n", encoding="utf-8")

    config = load_config(config_file)

    assert config.for_command("enums").ignore == []


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".entity-export.yml").write_text("enums: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    (tmp_path / ".entity-export.yml").write_text("- enums\n- constants\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)
