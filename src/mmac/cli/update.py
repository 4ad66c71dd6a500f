"""Block update CLI commands."""

import argparse
import sys
from pathlib import Path


def _split_block_lines(text: str) -> list[str]:
    # Only "\n" separates block lines; form feeds and other Unicode line
    # boundaries stay inside their line
    if not text:
        return []
    if text.endswith("\n"):
        text = text[:-1]
    return text.split("\n")


def _read_lines(lines_file: str | None) -> list[str]:
    """Block lines from a file, or stdin when no file (or ``-``) is given.

    Raises:
        ReadFailureError: The input could not be read or decoded.
    """
    from mmac.errors import ReadFailureError

    source = lines_file if lines_file and lines_file != "-" else None
    try:
        if source is None:
            text = sys.stdin.read()
        else:
            with open(Path(source), encoding="utf-8", newline="") as f:
                text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadFailureError(source or "<stdin>") from exc
    return _split_block_lines(text)


def cmd_update(args: argparse.Namespace) -> int:
    from mmac.block.rewriter import BlockOptions, read_fingerprint
    from mmac.block.sync import read_text, update_file
    from mmac.config import load_config

    config = load_config(args.config)
    options = BlockOptions(
        update_instruction=args.update_script or config.update_script or "",
        file_path=args.file,
        lines=_read_lines(args.lines_file),
        block_id=args.id,
        fingerprint=args.hash,
        extension=args.extension,
        comments=config.comments,
    )

    if args.check:
        result = update_file(options, dry_run=True)
        if not result.changed:
            print(f"  {result.path}: block '{args.id}' is up to date")
            return 0
        stamped = read_fingerprint(read_text(args.file), options)
        print(
            f"  {result.path}: block '{args.id}' is stale "
            f"(stamped {stamped or 'none'}, expected {result.fingerprint})",
            file=sys.stderr,
        )
        return 1

    result = update_file(options, dry_run=args.dry_run)
    prefix = "[DRY RUN] " if args.dry_run else ""
    print(f"  {prefix}{result.path}: {result.action} (hash {result.fingerprint})")
    return 0
