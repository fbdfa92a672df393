"""Command-line interface for cxxtool.

Usage:
    cxxtool purge [--config <file>] [--test] [--verbose]
    cxxtool generate [--config <file>] [--test] [--verbose]
    cxxtool sanitize [--config <file>] [--test] [--verbose]
    cxxtool list-tools
    cxxtool list-templates [--verbose]
"""

import argparse
import sys

from cxxtool import VERSION
from cxxtool.cli.listing import cmd_list_templates, cmd_list_tools
from cxxtool.cli.process import cmd_process
from cxxtool.config import default_config_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cxxtool",
        description=f"cxxtool v{VERSION} - maintain C, C++ and Objective-C projects",
    )
    sub = parser.add_subparsers(dest="command")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config", default=str(default_config_path()),
        help="Configuration file to use (default: %(default)s)",
    )
    common.add_argument(
        "--test", action="store_true",
        help="Don't write changed files",
    )
    common.add_argument(
        "--verbose", action="store_true",
        help="Display verbose messages",
    )

    sub.add_parser(
        "purge", parents=[common],
        help="Remove all generated code from all source files",
    )
    sub.add_parser(
        "generate", parents=[common],
        help="Expand templates and sanitize all source files",
    )
    sub.add_parser(
        "sanitize", parents=[common],
        help="Run only the sanitizers on all source files",
    )

    sub.add_parser("list-tools", help="Display built-in tools")
    tpl = sub.add_parser("list-templates", help="Display built-in templates")
    tpl.add_argument(
        "--verbose", action="store_true",
        help="Also show each template's purpose",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    dispatch = {
        "purge": cmd_process,
        "generate": cmd_process,
        "sanitize": cmd_process,
        "list-tools": cmd_list_tools,
        "list-templates": cmd_list_templates,
    }
    return dispatch[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
