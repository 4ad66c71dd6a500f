"""Exception hierarchy for mmac.

Every failure is raised to the immediate caller; nothing is retried or
recovered internally. The CLI maps ``MmacError`` to exit code 1.
"""

from __future__ import annotations


class MmacError(Exception):
    """Base error for all mmac exceptions."""


class BlockError(MmacError):
    """A generated block could not be rewritten for a given file."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class EmptyContentError(BlockError, ValueError):
    def __init__(self, path: str) -> None:
        super().__init__(f'No content provided for file "{path}"', path)


class MissingUpdateInstructionError(BlockError, ValueError):
    def __init__(self, path: str) -> None:
        super().__init__(f'No update script provided for file "{path}"', path)


class MissingStartMarkerError(BlockError):
    def __init__(self, path: str) -> None:
        super().__init__(
            f'Could not find start content comment in file "{path}"', path,
        )


class MissingEndMarkerError(BlockError):
    def __init__(self, path: str) -> None:
        super().__init__(
            f'Could not find end content comment in file "{path}"', path,
        )


class MarkerOrderError(BlockError):
    def __init__(self, path: str) -> None:
        super().__init__(
            "End comment is located before content start comment "
            f'in file "{path}"',
            path,
        )


class ReadFailureError(BlockError):
    """Reading the target file failed. The ``OSError`` is chained as the cause."""

    def __init__(self, path: str) -> None:
        super().__init__(f'Could not read file "{path}"', path)


class WriteFailureError(BlockError):
    def __init__(self, path: str) -> None:
        super().__init__(f'Could not write file "{path}"', path)


class UnknownExtensionError(MmacError, ValueError):
    def __init__(self, extension: str) -> None:
        super().__init__(f'Unknown extension "{extension}"')
        self.extension = extension


class UnsupportedVcsError(MmacError, ValueError):
    def __init__(self, vcs: str, supported: tuple[str, ...]) -> None:
        choices = ", ".join(f'"{name}"' for name in supported)
        super().__init__(
            f'Unsupported VCS "{vcs}", supported values are {choices}',
        )
        self.vcs = vcs


class VcsCommandError(MmacError):
    """The VCS status command exited non-zero or could not be started."""

    def __init__(self, command: list[str], returncode: int, stderr: str = "") -> None:
        detail = f": {stderr.strip()}" if stderr.strip() else ""
        super().__init__(
            f"'{' '.join(command)}' failed with exit code {returncode}{detail}",
        )
        self.command = command
        self.returncode = returncode


class ConfigError(MmacError, ValueError):
    """The configuration file is unreadable or has the wrong shape."""


class CommentStyleError(MmacError, ValueError):
    """A comment style override is not one of the accepted shapes."""
