"""Exception classes for gitlab-release operations.

Every failure the release workflow can end in is a ReleaseToolError
subclass. Each carries a matchable ``kind``, a static ``error_prefix``
context label, an optional ``target`` (file, tag or project the failure
concerns) and the underlying ``cause``.
"""

from enum import Enum

from gitlab_release.constants import (
    EXIT_ERROR,
    EXIT_INVALID_RESPONSE_CODE,
    EXIT_PARSE_ERROR,
)
from gitlab_release.gitlab.errors import GitLabAPIError


class ErrorKind(Enum):
    """Category of a release workflow failure."""

    PATH = "path"
    UPLOAD = "upload"
    REPLACE = "replace"
    PUBLISH = "publish"
    RESOLVE = "resolve"
    PARSE = "parse"


class ReleaseToolError(Exception):
    """Base exception for gitlab-release operations."""

    kind: ErrorKind
    error_prefix: str = "Operation failed"

    def __init__(
        self,
        message: str,
        *,
        target: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        """Initialize error with message, optional target and cause.

        Args:
            message: Error message describing the failure.
            target: Optional name of the file, tag or project concerned.
            cause: Underlying exception, kept for diagnostics.

        """
        super().__init__(message)
        self.message = message
        self.target = target
        self.cause = cause

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"

    @property
    def exit_code(self) -> int:
        """Process exit code for this failure."""
        if isinstance(self.cause, GitLabAPIError):
            return EXIT_INVALID_RESPONSE_CODE
        return EXIT_ERROR


class PathError(ReleaseToolError):
    """Raised when a local asset path cannot be read."""

    kind = ErrorKind.PATH
    error_prefix = "Get local assets failed"


class UploadError(ReleaseToolError):
    """Raised when uploading any single asset fails."""

    kind = ErrorKind.UPLOAD
    error_prefix = "Upload files failed"


class ReplaceError(ReleaseToolError):
    """Raised when looking up or deleting the existing release fails."""

    kind = ErrorKind.REPLACE
    error_prefix = "Delete release failed"


class PublishError(ReleaseToolError):
    """Raised when creating the release fails."""

    kind = ErrorKind.PUBLISH
    error_prefix = "Create release failed"


class ResolveError(ReleaseToolError):
    """Raised when the project cannot be resolved from the repository."""

    kind = ErrorKind.RESOLVE
    error_prefix = "Get project failed"


class OriginParseError(ResolveError):
    """Raised when the origin URL does not end in ``owner/name``."""

    error_prefix = "Parse origin url failed"

    @property
    def exit_code(self) -> int:
        """Process exit code for this failure."""
        return EXIT_PARSE_ERROR


class CLIParseError(ReleaseToolError):
    """Raised when command-line arguments are invalid."""

    kind = ErrorKind.PARSE
    error_prefix = "Flag parse failed"

    @property
    def exit_code(self) -> int:
        """Process exit code for this failure."""
        return EXIT_PARSE_ERROR
