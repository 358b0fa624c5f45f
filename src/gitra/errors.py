"""Error taxonomy for gitra.

Every failure that ends an invocation is a ``GitraError``.  The CLI reports
the message on stderr and exits non-zero; nothing is retried.
"""

from __future__ import annotations

from collections.abc import Sequence


class GitraError(Exception):
    """Base class for all errors reported to the user."""


class ConfigError(GitraError):
    """A required configuration value is missing or unreadable."""


class ValidationError(GitraError):
    """User input was rejected before any I/O took place."""


class TransportError(GitraError):
    """The request to Jira could not be completed."""


class DecodeError(GitraError):
    """The Jira response body could not be understood."""


class RemoteError(GitraError):
    """Jira answered with error messages."""

    def __init__(self, messages: Sequence[str]) -> None:
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))


class NotFoundError(GitraError):
    """No issue matched an id-scoped search."""


class AmbiguousResultError(GitraError):
    """More than one issue matched an id-scoped search."""

    def __init__(self, message: str, candidates: Sequence[object]) -> None:
        self.candidates = list(candidates)
        super().__init__(message)


class VcsError(GitraError):
    """A git subprocess failed."""

    def __init__(self, message: str, stderr: str = "") -> None:
        self.stderr = stderr
        super().__init__(f"{message}: {stderr}" if stderr else message)
