# studiogen/cli.py
"""
Command-line entry point.

Usage:
    studiogen [-p PKG] [-app] [base]
    studiogen -p com.example.app -app myproj
    studiogen --dry-run myproj

Exit status is 0 even when individual artifacts failed (they are logged);
pass --strict to get 1 instead. Only the first positional is used as the
base directory; any further positionals are ignored.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from studiogen.core.constants import APP_NAME, APP_VERSION
from studiogen.emit.emitter import generate
from studiogen.layout.planner import plan_layout

_log = logging.getLogger("studiogen.cli")


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stdout,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Generate an Android Studio project skeleton.",
    )
    parser.add_argument(
        "base",
        nargs="*",
        default=[],
        help="Base directory (default: current working directory). Extra positionals are ignored.",
    )
    parser.add_argument(
        "-p", "--package",
        dest="package",
        default="",
        metavar="PKG",
        help="Package name written into AndroidManifest.xml.",
    )
    parser.add_argument(
        "-app", "--app",
        dest="is_app",
        action="store_true",
        help="Mark the project as an application (default: library).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log the planned artifacts and exit without writing anything.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any artifact failed.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    base = args.base[0] if args.base else ""
    layout = plan_layout(base, package=args.package, is_app=args.is_app)

    if args.dry_run:
        for artifact in layout.artifacts():
            _log.info("[dry run] %-9s %s", artifact.kind.value, artifact.path)
        return 0

    report = generate(layout)
    if args.strict and not report.ok:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
