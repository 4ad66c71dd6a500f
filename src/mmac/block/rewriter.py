"""Marker-block rewrite — replaces the lines between a pair of markers.

A block is delimited by two comment lines carrying the same id:

    /* GENERATED_START(id:main;hash:<md5>) This is generated content, ... */
    ...generated lines...
    /* GENERATED_END(id:main) */

Rewriting keeps everything outside the markers byte-identical, stamps a
fresh start marker and writes a canonical end marker. The rewrite is a pure
function of the current text and the options; the file round trip lives in
``mmac.block.sync``.
"""

from __future__ import annotations

import hashlib
import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from pathlib import PurePath
from typing import Any

from mmac.block.comments import CommentStyle, resolve_comment_style
from mmac.errors import (
    EmptyContentError,
    MarkerOrderError,
    MissingEndMarkerError,
    MissingStartMarkerError,
    MissingUpdateInstructionError,
)

logger = logging.getLogger(__name__)

DEFAULT_ID = "main"
NOTICE = "This is generated content, do not modify by hand, to regenerate run"

_HASH_RE = re.compile(r"hash:([^)]*)\)")


def compute_fingerprint(lines: list[str]) -> str:
    """MD5 hex digest of the block lines joined by newline."""
    digest = hashlib.md5("\n".join(lines).encode("utf-8"), usedforsecurity=False)
    return digest.hexdigest()


@dataclass
class BlockOptions:
    """Everything needed to rewrite one block.

    ``fingerprint`` and ``extension`` are computed by ``resolved()`` when
    left unset: the fingerprint from ``lines``, the extension from the
    suffix of ``file_path``.
    """

    update_instruction: str = ""
    file_path: str = ""
    lines: list[str] = field(default_factory=list)
    block_id: str = DEFAULT_ID
    fingerprint: str | None = None
    extension: str | None = None
    comments: Mapping[str, Any] = field(default_factory=dict)
    post_process: Callable[[str], str] | None = None

    def resolved(self) -> BlockOptions:
        """Return a copy with computed defaults filled in."""
        lines = list(self.lines or [])
        return replace(
            self,
            lines=lines,
            fingerprint=(
                self.fingerprint if self.fingerprint is not None
                else compute_fingerprint(lines)
            ),
            extension=(
                self.extension if self.extension is not None
                else PurePath(self.file_path).suffix
            ),
            comments=dict(self.comments or {}),
        )

    def validate(self) -> CommentStyle:
        """Check preconditions and return the comment style to use.

        Raises:
            EmptyContentError: No lines to place in the block.
            MissingUpdateInstructionError: No regeneration instruction.
            UnknownExtensionError: Extension not in the merged style table.
        """
        if not self.lines:
            raise EmptyContentError(self.file_path)
        if not self.update_instruction:
            raise MissingUpdateInstructionError(self.file_path)
        return self.comment_style()

    def comment_style(self) -> CommentStyle:
        extension = self.extension
        if extension is None:
            extension = PurePath(self.file_path).suffix
        return resolve_comment_style(extension, self.comments)


def marker_patterns(style: CommentStyle, block_id: str) -> tuple[re.Pattern, re.Pattern]:
    """Build the (start, end) marker regexes for a block id.

    The comment strings and the id are escaped, so characters such as
    ``*`` or ``(`` match literally. Both patterns are used with
    ``re.match`` and so only match at the start of a line.
    """
    start = re.compile(
        re.escape(style.start)
        + r"GENERATED_START\(id:"
        + re.escape(block_id)
        + ";"
    )
    end = re.compile(
        re.escape(style.start)
        + r"GENERATED_END\(id:"
        + re.escape(block_id)
        + r"\)"
        + re.escape(style.end)
    )
    return start, end


def find_markers(
    lines: list[str],
    style: CommentStyle,
    block_id: str = DEFAULT_ID,
) -> tuple[int | None, int | None]:
    """Return the indices of the first start and first end marker.

    Later markers with the same id are ignored. Either index is None when
    no line matches.
    """
    start_re, end_re = marker_patterns(style, block_id)
    start_index = next(
        (i for i, line in enumerate(lines) if start_re.match(line)), None,
    )
    end_index = next(
        (i for i, line in enumerate(lines) if end_re.match(line)), None,
    )
    return start_index, end_index


def render_start_marker(
    style: CommentStyle,
    block_id: str,
    fingerprint: str,
    update_instruction: str,
) -> str:
    return (
        f"{style.start}GENERATED_START(id:{block_id};hash:{fingerprint}) "
        f'{NOTICE} "{update_instruction}"{style.end}'
    )


def render_end_marker(style: CommentStyle, block_id: str) -> str:
    return f"{style.start}GENERATED_END(id:{block_id}){style.end}"


def _locate(lines: list[str], style: CommentStyle, options: BlockOptions) -> tuple[int, int]:
    start, end = find_markers(lines, style, options.block_id)
    if start is None:
        raise MissingStartMarkerError(options.file_path)
    if end is None:
        raise MissingEndMarkerError(options.file_path)
    if start > end:
        raise MarkerOrderError(options.file_path)
    return start, end


def rewrite_block(text: str, options: BlockOptions) -> str:
    """Replace the block identified by ``options.block_id`` in ``text``.

    Args:
        text: Current full text of the file.
        options: Block content and metadata.

    Returns:
        The new full text, after ``options.post_process`` if one is set.

    Raises:
        BlockError: A precondition failed or the markers are missing or
            out of order.
        UnknownExtensionError: No comment style for the file's extension.
    """
    opts = options.resolved()
    style = opts.validate()

    # Splitting on "\n" alone keeps any "\r" attached to its line
    old_lines = text.split("\n")
    start, end = _locate(old_lines, style, opts)
    logger.debug(
        "Block %r in %s spans lines %d-%d, writing %d line(s)",
        opts.block_id, opts.file_path, start + 1, end + 1, len(opts.lines),
    )

    new_lines = [
        *old_lines[:start],
        render_start_marker(style, opts.block_id, opts.fingerprint, opts.update_instruction),
        *opts.lines,
        render_end_marker(style, opts.block_id),
        *old_lines[end + 1:],
    ]
    new_text = "\n".join(new_lines)

    if opts.post_process is not None:
        new_text = opts.post_process(new_text)
    return new_text


def read_fingerprint(text: str, options: BlockOptions) -> str | None:
    """Return the hash stamped in the block's start marker.

    Returns None when the marker has no ``hash:<value>)`` part, as in a
    freshly hand-written ``GENERATED_START(id:main;hash)`` placeholder.

    Raises:
        MissingStartMarkerError: The block has no start marker.
        UnknownExtensionError: No comment style for the file's extension.
    """
    style = options.comment_style()
    lines = text.split("\n")
    start, _ = find_markers(lines, style, options.block_id)
    if start is None:
        raise MissingStartMarkerError(options.file_path)
    # the hash directly follows the "id:<id>;" prefix, which may itself
    # contain "hash:"
    start_re, _ = marker_patterns(style, options.block_id)
    line = lines[start]
    match = _HASH_RE.match(line, start_re.match(line).end())
    return match.group(1) if match else None
