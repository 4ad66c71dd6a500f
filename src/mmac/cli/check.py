"""Unstaged-change check — run after regenerating content in CI."""

import argparse
import sys

from mmac.errors import MmacError
from mmac.vcs.status import SUPPORTED_VCS, detect_unstaged

HELP_TEXT = """\
mmac-check is a helper from the mmac package, it is meant to be run
after content is generated to validate that there are no unstaged files.

Example:
mmac-check --update-script="npm run generate-docs"
"""


def run_check(update_script: str | None, vcs: str, cwd=None) -> int:
    """Fail when the working copy has uncommitted changes.

    Returns:
        0 when clean, 1 on a missing script, unsupported VCS, or when
        unstaged files exist.
    """
    if not update_script:
        print("No --update-script was provided", file=sys.stderr)
        return 1

    if vcs not in SUPPORTED_VCS:
        print(
            'The supported --vcs values include "git", "svn" or "mercurial".\n'
            f'Unexpected value provided "{vcs}"',
            file=sys.stderr,
        )
        return 1

    modified = detect_unstaged(vcs, cwd=cwd)
    if modified:
        listing = "\n".join(f"- {path}" for path in modified)
        print(
            f'There are unstaged changes, run "{update_script}" locally and '
            f"commit the changes. Unstaged files:\n\n{listing}",
            file=sys.stderr,
        )
        return 1
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    from mmac.config import load_config

    config = load_config(args.config)
    update_script = args.update_script or config.update_script
    vcs = args.vcs or config.vcs or "git"
    return run_check(update_script, vcs)


class _CheckParser(argparse.ArgumentParser):
    """Parser that exits with 1 instead of 2 on bad arguments."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_check_parser() -> argparse.ArgumentParser:
    parser = _CheckParser(
        prog="mmac-check",
        description=HELP_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--update-script", default=None,
        help="The script to regenerate the content locally",
    )
    parser.add_argument(
        "--vcs", default="git",
        help='Used to specify VCS. Supported values are "git" | "svn" | "mercurial" (default: git)',
    )
    return parser


def main_check(argv: list[str] | None = None) -> int:
    """Entry point for the standalone ``mmac-check`` command."""
    args = build_check_parser().parse_args(argv)
    try:
        return run_check(args.update_script, args.vcs)
    except MmacError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main_check())
