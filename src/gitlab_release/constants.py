"""Centralized constants module for gitlab-release.

Single source of truth for endpoints, exit codes, configuration keys and
logging formats shared across the package.

Usage:
    from gitlab_release.constants import DEFAULT_GITLAB_API_URL
"""

from typing import Final

# =============================================================================
# GitLab endpoints
# =============================================================================

DEFAULT_GITLAB_URL: Final[str] = "https://gitlab.com"
API_PATH_SUFFIX: Final[str] = "/api/v4"
DEFAULT_GITLAB_API_URL: Final[str] = DEFAULT_GITLAB_URL + API_PATH_SUFFIX

# Header GitLab reads personal/project access tokens from
AUTH_HEADER: Final[str] = "PRIVATE-TOKEN"

# =============================================================================
# Process exit codes
# =============================================================================

EXIT_OK: Final[int] = 0
EXIT_ERROR: Final[int] = 10
EXIT_PARSE_ERROR: Final[int] = 11
EXIT_INVALID_RESPONSE_CODE: Final[int] = 12

# =============================================================================
# Environment variables
# =============================================================================

ENV_API_URL: Final[str] = "GITLAB_API"
ENV_BASE_URL: Final[str] = "GITLAB_URL"
ENV_TOKEN: Final[str] = "GITLAB_TOKEN"
ENV_CONFIG_DIR: Final[str] = "GLR_CONFIG_DIR"
ENV_LOG_DIR: Final[str] = "GLR_LOG_DIR"

# =============================================================================
# Configuration
# =============================================================================

APP_NAME: Final[str] = "glr"
CONFIG_FILE_NAME: Final[str] = "settings.conf"
LOG_FILE_NAME: Final[str] = "glr.log"

# Keyring service/user pair the token may be stored under
KEYRING_SERVICE: Final[str] = "glr"
KEYRING_USERNAME: Final[str] = "gitlab_token"

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_GITLAB: Final[str] = "gitlab"
SECTION_NETWORK: Final[str] = "network"

KEY_API_URL: Final[str] = "api_url"
KEY_BASE_URL: Final[str] = "base_url"
KEY_TIMEOUT_SECONDS: Final[str] = "timeout_seconds"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_LOG_FILE: Final[str] = "log_file"

DEFAULT_TIMEOUT_SECONDS: Final[int] = 30
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"

# =============================================================================
# Logging
# =============================================================================

LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
