"""Comment styles keyed by file extension.

A style is the literal text that opens and closes a single-line comment in
the host language. Marker lines are built by wrapping the sentinel text in
the style for the target file's extension.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from mmac.errors import CommentStyleError, UnknownExtensionError


@dataclass(frozen=True)
class CommentStyle:
    start: str
    end: str


JS_LIKE = CommentStyle(start="/* ", end=" */")
HTML_LIKE = CommentStyle(start="<!-- ", end=" -->")

DEFAULT_COMMENTS: Mapping[str, CommentStyle] = {
    ".js": JS_LIKE,
    ".jsx": JS_LIKE,
    ".ts": JS_LIKE,
    ".tsx": JS_LIKE,

    ".css": JS_LIKE,
    ".scss": JS_LIKE,
    ".saas": JS_LIKE,
    ".less": JS_LIKE,
    ".stylus": JS_LIKE,

    ".html": HTML_LIKE,
    ".md": HTML_LIKE,
}


def _text(value: Any) -> str:
    # YAML renders an empty `end:` as None
    return "" if value is None else str(value)


def to_comment_style(value: Any) -> CommentStyle:
    """Coerce one override value into a ``CommentStyle``.

    Raises:
        CommentStyleError: If the value is not one of the accepted shapes.
    """
    if isinstance(value, CommentStyle):
        return value
    if isinstance(value, Mapping):
        if "start" not in value or "end" not in value:
            raise CommentStyleError(f"comment style mapping needs 'start' and 'end': {value!r}")
        return CommentStyle(start=_text(value["start"]), end=_text(value["end"]))
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return CommentStyle(start=_text(value[0]), end=_text(value[1]))
    raise CommentStyleError(f"Cannot build a comment style from {value!r}")


def merge_comments(
    overrides: Mapping[str, Any] | None = None,
) -> dict[str, CommentStyle]:
    """Overlay ``overrides`` on the built-in table. Overrides win per key."""
    merged = dict(DEFAULT_COMMENTS)
    for ext, style in (overrides or {}).items():
        merged[ext] = to_comment_style(style)
    return merged


def resolve_comment_style(
    extension: str,
    overrides: Mapping[str, Any] | None = None,
) -> CommentStyle:
    """Look up the comment style for ``extension`` (leading dot included).

    Args:
        extension: File extension such as ``".js"``.
        overrides: Extra or replacement styles keyed by extension.

    Returns:
        The resolved CommentStyle.

    Raises:
        UnknownExtensionError: If neither table knows the extension.
    """
    style = merge_comments(overrides).get(extension)
    if style is None:
        raise UnknownExtensionError(extension)
    return style
