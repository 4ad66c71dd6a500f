"""Unstaged-change detection for git, svn and mercurial working copies.

Each VCS is asked for its short status listing and the output is reduced to
bare paths, in the order the tool printed them.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable
from pathlib import Path

from mmac.errors import UnsupportedVcsError, VcsCommandError

logger = logging.getLogger(__name__)

SUPPORTED_VCS = ("git", "svn", "mercurial")

# Characters allowed in the seven svn status columns
_SVN_STATUS_CHARS = set(" ACDIMRX?!~LSKOTB+*")

STATUS_COMMANDS: dict[str, list[str]] = {
    "git": ["git", "status", "--porcelain"],
    "svn": ["svn", "status"],
    "mercurial": ["hg", "status"],
}


def _run_vcs(command: list[str], cwd: Path | str | None) -> subprocess.CompletedProcess:
    """Run a VCS command and return the result."""
    try:
        return subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
        )
    except OSError as exc:
        raise VcsCommandError(command, 127, str(exc)) from exc


def _unquote_git_path(path: str) -> str:
    # git wraps paths with special characters in quotes and C-style escapes,
    # non-ASCII bytes as octal (\303\251)
    if len(path) >= 2 and path[0] == '"' and path[-1] == '"':
        inner = path[1:-1]
        return inner.encode("utf-8").decode("unicode_escape").encode("latin-1").decode("utf-8")
    return path


def parse_git_status(output: str) -> list[str]:
    """Parse ``git status --porcelain`` output.

    Format: ``XY <path>`` or ``XY <old> -> <new>`` for renames and copies.
    """
    paths = []
    for line in output.splitlines():
        if len(line) < 4:
            continue
        path = line[3:]
        if " -> " in path:
            path = path.split(" -> ", 1)[1]
        paths.append(_unquote_git_path(path))
    return paths


def parse_svn_status(output: str) -> list[str]:
    """Parse ``svn status`` output.

    Seven status columns, a space, then the path. Conflict summaries,
    external-item headers and tree-conflict detail lines do not have that
    shape and are skipped.
    """
    paths = []
    for line in output.splitlines():
        if len(line) < 9 or line[7] != " ":
            continue
        columns = line[:7]
        if not columns.strip() or not set(columns) <= _SVN_STATUS_CHARS:
            continue
        paths.append(line[8:])
    return paths


def parse_hg_status(output: str) -> list[str]:
    """Parse ``hg status`` output. Format: ``<code> <path>``."""
    paths = []
    for line in output.splitlines():
        if len(line) < 3 or line[1] != " ":
            continue
        paths.append(line[2:])
    return paths


STATUS_PARSERS: dict[str, Callable[[str], list[str]]] = {
    "git": parse_git_status,
    "svn": parse_svn_status,
    "mercurial": parse_hg_status,
}


def detect_unstaged(vcs: str = "git", cwd: Path | str | None = None) -> list[str]:
    """List files with uncommitted changes in the working copy.

    Args:
        vcs: One of ``SUPPORTED_VCS``.
        cwd: Directory to run the status command in. Defaults to the
            current directory.

    Returns:
        Modified, added, deleted and untracked paths as the VCS reports them.

    Raises:
        UnsupportedVcsError: ``vcs`` is not supported.
        VcsCommandError: The status command could not run or failed.
    """
    if vcs not in SUPPORTED_VCS:
        raise UnsupportedVcsError(vcs, SUPPORTED_VCS)

    command = STATUS_COMMANDS[vcs]
    logger.debug("Running %s in %s", " ".join(command), cwd or Path.cwd())
    result = _run_vcs(command, cwd)
    if result.returncode != 0:
        raise VcsCommandError(command, result.returncode, result.stderr)

    paths = STATUS_PARSERS[vcs](result.stdout)
    logger.debug("%s reported %d changed path(s)", vcs, len(paths))
    return paths
