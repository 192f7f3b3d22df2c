"""Command-line entry point for term-shell."""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .exceptions import ShellInitError
from .logger import setup_logging
from .shell import Shell


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='term-shell',
        description="Interactive shell with builtins and search path commands.",
    )
    parser.add_argument('-c', '--command', metavar='LINE',
                        help="run a single line and exit")
    parser.add_argument('--no-path', action='store_true',
                        help="do not discover commands on the search path")
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help="level for the log file (default: WARNING)")
    parser.add_argument('--version', action='version',
                        version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        shell = Shell(discover_path=not args.no_path)
    except ShellInitError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.command is not None:
        return 0 if shell.execute(args.command) else 1

    return shell.run()
