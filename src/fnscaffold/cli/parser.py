"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("fnscaffold")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fnscaffold")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    create_parser = subparsers.add_parser(
        "create",
        help="Create a new function locally",
        description="Create a new function from a template or a GitHub directory URL",
        epilog=(
            "examples:\n  fnscaffold create\n  fnscaffold create hello-world\n  fnscaffold create --name hello-world"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    create_parser.add_argument(
        "name", nargs="?", default=None, help="Name of the new function inside the functions folder"
    )
    create_parser.add_argument("--name", "-n", dest="name_flag", default=None, help="Function name")
    create_parser.add_argument("--functions", "-f", default=None, help="Functions folder")
    create_parser.add_argument("--url", "-u", default=None, help="Pull template from URL")
    create_parser.add_argument("--config", default="./fnscaffold.json", help="Path to fnscaffold.json")
    create_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


__all__ = ["build_parser"]
