"""mmac — keep generated content blocks inside hand-written files up to date."""

from mmac.block import (
    DEFAULT_COMMENTS,
    BlockOptions,
    CommentStyle,
    UpdateResult,
    compute_fingerprint,
    rewrite_block,
    update_file,
)
from mmac.errors import (
    BlockError,
    CommentStyleError,
    ConfigError,
    EmptyContentError,
    MarkerOrderError,
    MissingEndMarkerError,
    MissingStartMarkerError,
    MissingUpdateInstructionError,
    MmacError,
    ReadFailureError,
    UnknownExtensionError,
    UnsupportedVcsError,
    VcsCommandError,
    WriteFailureError,
)
from mmac.vcs import SUPPORTED_VCS, detect_unstaged

__all__ = [
    "DEFAULT_COMMENTS",
    "SUPPORTED_VCS",
    "BlockError",
    "BlockOptions",
    "CommentStyle",
    "CommentStyleError",
    "ConfigError",
    "EmptyContentError",
    "MarkerOrderError",
    "MissingEndMarkerError",
    "MissingStartMarkerError",
    "MissingUpdateInstructionError",
    "MmacError",
    "ReadFailureError",
    "UnknownExtensionError",
    "UnsupportedVcsError",
    "UpdateResult",
    "VcsCommandError",
    "WriteFailureError",
    "compute_fingerprint",
    "detect_unstaged",
    "rewrite_block",
    "update_file",
]
