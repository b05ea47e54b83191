"""Exception hierarchy for semver-action.

All errors raised by this package derive from SemverActionError so the
CLI can report them uniformly. Commit parsing never raises; an unparseable
header is represented by an empty commit type instead.
"""

from __future__ import annotations


class SemverActionError(Exception):
    """Base exception for all semver-action errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


# =============================================================================
# Version errors
# =============================================================================


class InvalidVersionFormatError(SemverActionError, ValueError):
    """Version string does not match the supported grammar."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid version format: {text!r}")


# =============================================================================
# Configuration errors
# =============================================================================


class ConfigError(SemverActionError):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Action inputs are missing or invalid."""


# =============================================================================
# Version control errors
# =============================================================================


class VCSError(SemverActionError):
    """Base exception for version control errors."""


class GitError(VCSError):
    """A git command failed."""

    def __init__(self, message: str, stderr: str | None = None) -> None:
        self.stderr = stderr
        if stderr:
            message = f"{message}\n{stderr.strip()}"
        super().__init__(message)


class ShallowCloneError(VCSError):
    """Repository history is truncated, tags and commits cannot be resolved."""


# =============================================================================
# Forge errors
# =============================================================================


class ForgeError(SemverActionError):
    """Base exception for remote forge (GitHub) errors."""


class GitHubAPIError(ForgeError):
    """The GitHub API rejected a request or could not be reached."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


# =============================================================================
# Output errors
# =============================================================================


class OutputError(SemverActionError):
    """Step outputs could not be written."""
