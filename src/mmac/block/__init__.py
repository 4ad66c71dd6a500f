"""Generated content blocks.

A block lives between two marker comments inside a hand-written file:

    <!-- GENERATED_START(id:main;hash:<md5>) This is generated content, ... -->
    ...generated lines...
    <!-- GENERATED_END(id:main) -->

Anything outside these markers is preserved untouched.
"""

from mmac.block.comments import DEFAULT_COMMENTS, CommentStyle, resolve_comment_style
from mmac.block.rewriter import (
    DEFAULT_ID,
    BlockOptions,
    compute_fingerprint,
    find_markers,
    read_fingerprint,
    rewrite_block,
)
from mmac.block.sync import UpdateResult, update_file

__all__ = [
    "DEFAULT_COMMENTS",
    "DEFAULT_ID",
    "BlockOptions",
    "CommentStyle",
    "UpdateResult",
    "compute_fingerprint",
    "find_markers",
    "read_fingerprint",
    "resolve_comment_style",
    "rewrite_block",
    "update_file",
]
