#!/usr/bin/env python3
"""fdocs CLI entrypoint."""

import argparse
import logging
import sys
from pathlib import Path

from featuredocs import __version__
from featuredocs.commands import complete as cmd_complete_module
from featuredocs.commands import create as cmd_create_module
from featuredocs.commands import log as cmd_log_module
from featuredocs.commands import update as cmd_update_module
from featuredocs.errors import FeatureDocsError, UsageError
from featuredocs.lib.config import find_project_root, load_project_config
from featuredocs.lib.output import Console

logger = logging.getLogger(__name__)

EPILOG = """\
examples:
  fdocs log 001-plinko-physics "Implemented peg collision detection"
  fdocs create 001-plinko-physics
  fdocs update 001-plinko-physics
  fdocs complete 001-plinko-physics
"""


def get_project_config(args):
    """Load project config from --root or the nearest project directory."""
    root = Path(args.root).resolve() if args.root else find_project_root(Path.cwd())
    logger.debug(f"Project root: {root}")
    return load_project_config(root)


def cmd_log(args, console):
    return cmd_log_module.cmd_log(args, get_project_config(args), console)


def cmd_create(args, console):
    return cmd_create_module.cmd_create(args, get_project_config(args), console)


def cmd_update(args, console):
    return cmd_update_module.cmd_update(args, get_project_config(args), console)


def cmd_complete(args, console):
    return cmd_complete_module.cmd_complete(args, get_project_config(args), console)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='fdocs',
        description='Manage feature documentation (CHANGELOG.md and CLAUDE.md)',
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--root', '-r', help='Project root (default: nearest directory with specs/)')
    parser.add_argument('--no-color', action='store_true', help='Disable colored output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Show debug logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    subparsers = parser.add_subparsers(dest='command', required=True)

    # fdocs log
    p_log = subparsers.add_parser('log', help='Add entry to feature CHANGELOG.md')
    p_log.add_argument('feature_id', help='Feature ID (e.g., 001-plinko-physics)')
    p_log.add_argument('message', nargs='?', help='Entry text')
    p_log.set_defaults(func=cmd_log)

    # fdocs create
    p_create = subparsers.add_parser('create', help='Create CHANGELOG.md and CLAUDE.md for feature')
    p_create.add_argument('feature_id', help='Feature ID')
    p_create.set_defaults(func=cmd_create)

    # fdocs update
    p_update = subparsers.add_parser('update', help='Update feature CLAUDE.md')
    p_update.add_argument('feature_id', help='Feature ID')
    p_update.set_defaults(func=cmd_update)

    # fdocs complete
    p_complete = subparsers.add_parser('complete', help='Mark feature complete and roll up to root CHANGELOG')
    p_complete.add_argument('feature_id', help='Feature ID')
    p_complete.set_defaults(func=cmd_complete)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    console = Console(colorize=not args.no_color)

    try:
        return args.func(args, console)
    except FeatureDocsError as e:
        console.error(str(e))
        if isinstance(e, UsageError):
            parser.print_usage(sys.stderr)
        return e.exit_code


if __name__ == '__main__':
    sys.exit(main())
