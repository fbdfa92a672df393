"""Listing commands for the built-in tools and templates."""

import argparse

from cxxtool.registry import build_registry
from cxxtool.text import format_table


def cmd_list_tools(args: argparse.Namespace) -> int:
    registry = build_registry()
    print("Tools:")
    for name, tool in registry.tools.items():
        print(f"  {name + ' (' + tool.kind + ')':<30}order {tool.order:>3}  {tool.purpose}")
    return 0


def cmd_list_templates(args: argparse.Namespace) -> int:
    registry = build_registry()
    print("Templates:")
    for name, template in registry.templates.items():
        print(f"  {name}")
        if template.requires:
            requires = format_table(template.requires, width=70)
            print("    requires: " + requires.replace("\n", "\n              "))
        if template.purpose and args.verbose:
            for line in template.purpose.splitlines():
                print(f"    {line}".rstrip())
    return 0
