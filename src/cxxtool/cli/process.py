"""Processing commands: purge, generate, sanitize."""

import argparse
import sys

import yaml

from cxxtool.config import load_config
from cxxtool.context import Context, RunOptions
from cxxtool.exceptions import CxxToolError
from cxxtool.logging_config import setup_logging

# command -> (purge, generate, sanitize)
MODES = {
    "purge": (True, True, False),
    "generate": (False, True, True),
    "sanitize": (False, False, True),
}


def run_options(args: argparse.Namespace) -> RunOptions:
    purge, generate, sanitize = MODES[args.command]
    return RunOptions(
        purge=purge,
        generate=generate,
        sanitize=sanitize,
        test=args.test,
        verbose=args.verbose,
    )


def cmd_process(args: argparse.Namespace) -> int:
    try:
        config = load_config(args.config)
        setup_logging(config["product"], args.verbose)
        result = Context(config, run_options(args)).run()
    except (CxxToolError, OSError, yaml.YAMLError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"\n{len(result.processed)} files checked, {len(result.modified)} modified, "
          f"{len(result.written)} written")
    if args.test and result.modified:
        print("\n[TEST MODE] No files were modified.")
    return 0
