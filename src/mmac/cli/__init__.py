"""Unified CLI for mmac.

Usage:
    mmac check --update-script "<cmd>" [--vcs git|svn|mercurial]
    mmac update <file> --update-script "<cmd>" [--id ID] [--hash H]
                [--lines-file F] [--extension .EXT] [--dry-run] [--check]

Global flags:
    --config <path>   Config file (default: $MMAC_CONFIG or ./.mmac.yaml)
    -v, --verbose     Debug logging on stderr
"""

import argparse
import sys

from mmac.block.rewriter import DEFAULT_ID
from mmac.cli.check import cmd_check
from mmac.cli.update import cmd_update
from mmac.errors import MmacError
from mmac.log import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mmac",
        description="Maintain generated content blocks inside hand-written files",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to the mmac config file",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # check
    check = sub.add_parser(
        "check", help="Fail if regeneration left uncommitted changes",
    )
    check.add_argument(
        "--update-script", default=None,
        help="The script to regenerate the content locally",
    )
    check.add_argument(
        "--vcs", default=None,
        help='Version control system: "git" (default), "svn" or "mercurial"',
    )

    # update
    upd = sub.add_parser(
        "update", help="Replace a generated block with lines from stdin",
    )
    upd.add_argument("file", help="File containing the block markers")
    upd.add_argument(
        "--update-script", default=None,
        help="Regeneration command stamped into the start marker",
    )
    upd.add_argument(
        "--id", default=DEFAULT_ID,
        help=f"Block id (default: {DEFAULT_ID})",
    )
    upd.add_argument(
        "--hash", default=None,
        help="Use this fingerprint instead of the content hash",
    )
    upd.add_argument(
        "--lines-file", default=None,
        help="Read block lines from this file instead of stdin",
    )
    upd.add_argument(
        "--extension", default=None,
        help="Comment style extension, e.g. .js (default: the file's suffix)",
    )
    upd.add_argument(
        "--dry-run", action="store_true",
        help="Report without writing",
    )
    upd.add_argument(
        "--check", action="store_true",
        help="Exit 1 if the block is stale, without writing",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        "check": cmd_check,
        "update": cmd_update,
    }

    try:
        return dispatch[args.command](args)
    except MmacError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
