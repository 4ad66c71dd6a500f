"""File round trip for a generated block — read, rewrite, write back.

The file is read and written with newline translation disabled so that
CRLF files keep their line endings outside the block.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from mmac.block.rewriter import BlockOptions, rewrite_block
from mmac.errors import ReadFailureError, WriteFailureError

logger = logging.getLogger(__name__)


@dataclass
class UpdateResult:
    """Outcome of updating one file."""

    path: str
    action: str
    fingerprint: str
    dry_run: bool = False

    @property
    def changed(self) -> bool:
        return self.action == "updated"

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "action": self.action,
            "fingerprint": self.fingerprint,
            "dry_run": self.dry_run,
        }


def read_text(path: Path | str) -> str:
    """Read a file as UTF-8 without newline translation.

    Raises:
        ReadFailureError: The file could not be read or decoded.
    """
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadFailureError(str(path)) from exc


def write_text(path: Path | str, text: str) -> None:
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as exc:
        raise WriteFailureError(str(path)) from exc


def update_file(options: BlockOptions, dry_run: bool = False) -> UpdateResult:
    """Rewrite the block in ``options.file_path`` on disk.

    Options are validated before the file is opened, so an invalid call
    never touches the disk. The file is only written when its text
    changes and ``dry_run`` is False.

    Args:
        options: Block content and metadata; ``file_path`` names the file.
        dry_run: If True, compute the result without writing.

    Returns:
        UpdateResult with action ``"updated"`` or ``"unchanged"``.
    """
    opts = options.resolved()
    opts.validate()

    old_text = read_text(opts.file_path)
    new_text = rewrite_block(old_text, opts)

    if new_text == old_text:
        logger.info("%s: block %r is up to date", opts.file_path, opts.block_id)
        return UpdateResult(opts.file_path, "unchanged", opts.fingerprint, dry_run)

    if dry_run:
        logger.info("%s: block %r would be updated", opts.file_path, opts.block_id)
    else:
        write_text(opts.file_path, new_text)
        logger.info("%s: block %r updated", opts.file_path, opts.block_id)
    return UpdateResult(opts.file_path, "updated", opts.fingerprint, dry_run)
