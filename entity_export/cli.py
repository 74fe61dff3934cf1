"""CLI entrypoints for entity-export commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from .commands import ExportCommand, UnsupportedRuntime, discover_commands
from .config import ConfigError, load_config
from .logging import configure_logging, get_logger


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser(commands: Sequence[ExportCommand]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="entity-export",
        description="Export backend enums and model constants to JavaScript modules.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--project-root",
        default=".",
        help="Backend project root; output paths and imports are relative to it.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to an .entity-export.yml file (defaults to the project root).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command in commands:
        command_parser = subparsers.add_parser(command.name, help=command.help)
        _add_verbose_option(command_parser, suppress_default=True)
        command.configure(command_parser)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for entity-export commands."""
    commands = discover_commands()
    parser = _build_parser(commands)
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))
    logger = get_logger("cli")

    command = next(item for item in commands if item.name == args.command)
    project_root = Path(args.project_root).expanduser().resolve()

    try:
        command.check_environment()
        config = load_config(Path(args.config) if args.config else project_root)
        options = command.build_options(args, config, project_root)
        report = command.exporter().export(options)
    except (UnsupportedRuntime, ConfigError, OSError) as exc:
        parser.exit(1, f"{exc}\n")

    if report.empty:
        logger.warning(command.empty_message)
        return 0

    module_path, *declaration_paths = report.written
    print(f"{command.noun} exported to {_relativize(module_path)}")
    for path in declaration_paths:
        print(f"TypeScript definitions exported to {_relativize(path)}")
    return 0


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
