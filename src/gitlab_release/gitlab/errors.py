"""Errors raised by the GitLab REST client."""


class GitLabError(Exception):
    """Base exception for GitLab client failures."""


class GitLabAPIError(GitLabError):
    """Raised when GitLab answers with a non-success status code."""

    def __init__(self, status: int, message: str, url: str | None = None) -> None:
        """Initialize API error.

        Args:
            status: HTTP status code returned by GitLab
            message: Error message extracted from the response body
            url: Request URL, if known

        """
        super().__init__(message)
        self.status = status
        self.message = message
        self.url = url

    def __str__(self) -> str:
        """Return formatted error message."""
        return f"api request failed: invalid status: {self.status}: {self.message}"


class GitLabNotFoundError(GitLabAPIError):
    """Raised when the requested resource does not exist (404)."""


class GitLabConnectionError(GitLabError):
    """Raised when the request could not be completed at transport level."""
