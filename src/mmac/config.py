"""Load the mmac configuration file.

Resolution order for the config path:
    --config flag
    MMAC_CONFIG — explicit config file path
    .mmac.yaml in the current directory

A missing default file means an empty configuration; a missing file that
was asked for explicitly is an error.

Example:

    vcs: git
    update_script: npm run generate
    comments:
      .lua: {start: "-- ", end: ""}
      .py: ["# ", ""]
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from mmac.block.comments import CommentStyle, to_comment_style
from mmac.errors import CommentStyleError, ConfigError

CONFIG_ENV = "MMAC_CONFIG"
DEFAULT_CONFIG_NAME = ".mmac.yaml"

_KNOWN_KEYS = {"vcs", "update_script", "comments"}


@dataclass
class MmacConfig:
    vcs: str | None = None
    update_script: str | None = None
    comments: dict[str, CommentStyle] = field(default_factory=dict)
    source: Path | None = None


def config_path(explicit: Path | str | None = None) -> tuple[Path, bool]:
    """Return the config path to use and whether it was asked for explicitly."""
    if explicit:
        return Path(explicit).expanduser(), True
    env = os.environ.get(CONFIG_ENV)
    if env:
        return Path(env).expanduser(), True
    return Path.cwd() / DEFAULT_CONFIG_NAME, False


def parse_config(data: Any, source: Path | None = None) -> MmacConfig:
    """Validate a parsed YAML document and build an MmacConfig."""
    where = f" in {source}" if source else ""
    if data is None:
        return MmacConfig(source=source)
    if not isinstance(data, dict):
        raise ConfigError(f"Config{where} is not a YAML mapping")

    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        raise ConfigError(f"Unknown config key(s){where}: {', '.join(sorted(unknown))}")

    for key in ("vcs", "update_script"):
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"'{key}'{where} must be a string")

    raw_comments = data.get("comments") or {}
    if not isinstance(raw_comments, dict):
        raise ConfigError(f"'comments'{where} must map extensions to comment styles")

    comments = {}
    for ext, raw in raw_comments.items():
        if not isinstance(ext, str) or not ext.startswith("."):
            raise ConfigError(f"Comment style key {ext!r}{where} must be an extension like '.py'")
        try:
            comments[ext] = to_comment_style(raw)
        except CommentStyleError as exc:
            raise ConfigError(f"Bad comment style for {ext}{where}: {exc}") from exc

    return MmacConfig(
        vcs=data.get("vcs"),
        update_script=data.get("update_script"),
        comments=comments,
        source=source,
    )


def load_config(path: Path | str | None = None) -> MmacConfig:
    """Load the mmac config file.

    Args:
        path: Explicit config path. Falls back to MMAC_CONFIG, then
            .mmac.yaml in the current directory.

    Returns:
        Parsed MmacConfig (empty when no default file exists).

    Raises:
        ConfigError: The file is missing (when explicit), unreadable,
            malformed YAML, or has the wrong shape.
    """
    cfg_path, explicit = config_path(path)
    if not cfg_path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {cfg_path}")
        return MmacConfig()

    try:
        with open(cfg_path) as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"Could not read config file {cfg_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Malformed YAML in {cfg_path}: {exc}") from exc

    return parse_config(data, cfg_path)
