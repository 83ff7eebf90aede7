"""Command line interface for componentkit."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_CONFIG_NAME, ProjectPaths
from .errors import ComponentKitError
from .generator import ComponentGenerator
from .prompts import InputCollector, Prompter
from .scaffold import ComponentScaffolder
from .templates import TemplateLibrary

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create starter files for new components")
    subparsers = parser.add_subparsers(dest="command", required=True)

    new_parser = subparsers.add_parser("new", help="interactively scaffold a new component")
    new_parser.add_argument(
        "-C",
        "--project-root",
        type=Path,
        default=None,
        help="Root of the host project (defaults to the current directory)",
    )
    new_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Project file holding the 'paths' object (defaults to <project-root>/{DEFAULT_CONFIG_NAME})",
    )
    new_parser.add_argument(
        "--templates",
        type=Path,
        default=None,
        help="Directory with template files overriding the built-in ones",
    )
    new_parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite existing files instead of failing",
    )
    new_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output",
    )

    return parser


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
    )


def _handle_new(args: argparse.Namespace, prompter: Prompter | None = None) -> int:
    root = args.project_root or Path.cwd()
    config_path = args.config or root / DEFAULT_CONFIG_NAME
    paths = ProjectPaths.from_package_json(config_path, root=root)
    templates = TemplateLibrary(directory=args.templates)
    generator = ComponentGenerator(
        paths,
        InputCollector(prompter),
        ComponentScaffolder(paths, templates, force=args.force),
    )
    report = generator.run()
    LOGGER.info("Created %d file(s) for %s", len(report.written), generator.spec.camel_name)
    return 0


def main(argv: Sequence[str] | None = None, *, prompter: Prompter | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    try:
        if args.command == "new":
            return _handle_new(args, prompter)
    except ComponentKitError as exc:
        LOGGER.error("%s", exc)
        return exc.exit_code
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
