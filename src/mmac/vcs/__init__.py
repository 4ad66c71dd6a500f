"""VCS module — detects uncommitted changes left behind by regeneration."""

from mmac.vcs.status import SUPPORTED_VCS, detect_unstaged

__all__ = [
    "SUPPORTED_VCS",
    "detect_unstaged",
]
