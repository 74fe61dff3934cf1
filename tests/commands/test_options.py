"""Tests for option merging in export commands."""

from __future__ import annotations

import argparse
from pathlib import Path

from entity_export.commands import ConstantsCommand, EnumsCommand
from entity_export.config import CommandConfig, ExportConfig


def _parse(command, argv):
    parser = argparse.ArgumentParser()
    command.configure(parser)
    return parser.parse_args(argv)


def test_enum_defaults(tmp_path: Path) -> None:
    command = EnumsCommand()
    options = command.build_options(_parse(command, []), ExportConfig(root=tmp_path), tmp_path)

    assert options.source_root == tmp_path / "app" / "enums"
    assert options.output_path == tmp_path / "resources" / "js" / "enums.js"
    assert options.import_root == tmp_path
    assert options.suffix == ""
    assert options.emit_declarations is False
    assert options.ignore == ("CREATED_AT", "UPDATED_AT")


def test_constant_defaults(tmp_path: Path) -> None:
    command = ConstantsCommand()
    options = command.build_options(_parse(command, []), ExportConfig(root=tmp_path), tmp_path)

    assert options.source_root == tmp_path / "app" / "models"
    assert options.output_path == tmp_path / "resources" / "js" / "constants.js"
    assert options.suffix == "Model"
    assert options.ignore == ()


def test_cli_arguments_override_config(tmp_path: Path) -> None:
    command = EnumsCommand()
    config = ExportConfig(
        root=tmp_path,
        app_dir="backend",
        commands={
            "enums": CommandConfig(path="choices", output="a.js", suffix="Cfg", ignore=["X"])
        },
    )
    args = _parse(command, ["b.js", "--path", "states", "--suffix", "Cli", "--typescript"])

    options = command.build_options(args, config, tmp_path)

    assert options.source_root == tmp_path / "backend" / "states"
    assert options.output_path == tmp_path / "b.js"
    assert options.suffix == "Cli"
    assert options.emit_declarations is True
    assert options.ignore == ("X",)


def test_config_values_fill_missing_arguments(tmp_path: Path) -> None:
    command = ConstantsCommand()
    config = ExportConfig(
        root=tmp_path,
        commands={"constants": CommandConfig(path="entities", typescript=True, suffix="Const")},
    )

    options = command.build_options(_parse(command, []), config, tmp_path)

    assert options.source_root == tmp_path / "app" / "entities"
    assert options.suffix == "Const"
    assert options.emit_declarations is True


def test_no_typescript_flag_beats_config(tmp_path: Path) -> None:
    command = EnumsCommand()
    config = ExportConfig(root=tmp_path, commands={"enums": CommandConfig(typescript=True)})

    disabled = command.build_options(_parse(command, ["--no-typescript"]), config, tmp_path)
    inherited = command.build_options(_parse(command, []), config, tmp_path)

    assert disabled.emit_declarations is False
    assert inherited.emit_declarations is True
