"""GitLab authentication.

Token storage lookup through the system keyring and application of the
token to outgoing request headers.
"""

import keyring
from keyring.errors import KeyringError

from gitlab_release.constants import (
    AUTH_HEADER,
    KEYRING_SERVICE,
    KEYRING_USERNAME,
)
from gitlab_release.logger import get_logger

logger = get_logger(__name__)


class KeyringTokenStore:
    """Read-only access to a GitLab token kept in the system keyring."""

    def __init__(
        self,
        service: str = KEYRING_SERVICE,
        username: str = KEYRING_USERNAME,
    ) -> None:
        """Initialize the store.

        Args:
            service: Keyring service name
            username: Keyring username the token is stored under

        """
        self.service = service
        self.username = username

    def get(self) -> str | None:
        """Return the stored token, or None if unavailable.

        A missing or locked keyring backend (headless CI, no DBus) is not
        an error: the caller simply runs without a keyring token.
        """
        try:
            token = keyring.get_password(self.service, self.username)
        except KeyringError as e:
            logger.debug("Keyring unavailable: %s", e)
            return None
        return token.strip() if token else None


class GitLabAuthManager:
    """Apply GitLab authentication to request headers."""

    def __init__(self, token: str | None) -> None:
        """Initialize the auth manager.

        Args:
            token: Personal/project access token, or None for anonymous

        """
        self._token = token
        self._user_notified = False

    def is_authenticated(self) -> bool:
        """Return True if a token is configured."""
        return bool(self._token)

    def apply_auth(self, headers: dict[str, str]) -> dict[str, str]:
        """Apply authentication to the given request headers.

        Args:
            headers: HTTP headers to update

        Returns:
            Headers with the token header set when a token is available

        """
        if self._token:
            headers[AUTH_HEADER] = self._token
        elif not self._user_notified:
            self._user_notified = True
            logger.warning(
                "No GitLab token configured. Set GITLAB_TOKEN to "
                "authenticate API requests."
            )
        return headers
