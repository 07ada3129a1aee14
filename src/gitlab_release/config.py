"""Settings for gitlab-release.

Settings come from three layers, later ones winning:

1. built-in defaults (``constants``)
2. optional INI file ``~/.config/glr/settings.conf``
3. environment variables (``GITLAB_API``, ``GITLAB_URL``, ``GITLAB_TOKEN``)

Example ``settings.conf``::

    [DEFAULT]
    console_log_level = WARNING
    log_level = INFO

    [gitlab]
    api_url = https://gitlab.example.com/api/v4

    [network]
    timeout_seconds = 30

The resolved ``Settings`` object is passed explicitly to the components
that need it; nothing below the CLI reads the environment.
"""

import configparser
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from gitlab_release.auth import KeyringTokenStore
from gitlab_release.constants import (
    API_PATH_SUFFIX,
    APP_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_GITLAB_API_URL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT_SECONDS,
    ENV_API_URL,
    ENV_BASE_URL,
    ENV_CONFIG_DIR,
    ENV_TOKEN,
    KEY_API_URL,
    KEY_BASE_URL,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_FILE,
    KEY_LOG_LEVEL,
    KEY_TIMEOUT_SECONDS,
    SECTION_DEFAULT,
    SECTION_GITLAB,
    SECTION_NETWORK,
)
from gitlab_release.logger import get_logger

logger = get_logger(__name__)

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def derive_base_url(api_url: str) -> str:
    """Derive the web base URL from an API URL.

    >>> derive_base_url("https://gitlab.example.com/api/v4")
    'https://gitlab.example.com'
    """
    base = api_url.rstrip("/")
    if base.endswith(API_PATH_SUFFIX):
        base = base[: -len(API_PATH_SUFFIX)]
    return base


@dataclass(slots=True, frozen=True)
class Settings:
    """Resolved runtime settings.

    Attributes:
        api_url: GitLab REST API base URL
        base_url: GitLab web base URL, prefix of uploaded asset URLs
        token: Access token, or None for anonymous requests
        timeout_seconds: Base network timeout for the HTTP session
        console_log_level: Console log level name
        log_level: File log level name
        log_file: Log file path, or None when file logging is off

    """

    api_url: str = DEFAULT_GITLAB_API_URL
    base_url: str = derive_base_url(DEFAULT_GITLAB_API_URL)
    token: str | None = None
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    console_log_level: str = DEFAULT_CONSOLE_LOG_LEVEL
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Path | None = None


def default_config_dir(env: Mapping[str, str] | None = None) -> Path:
    """Return the configuration directory (GLR_CONFIG_DIR or ~/.config/glr)."""
    env = os.environ if env is None else env
    override = env.get(ENV_CONFIG_DIR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / APP_NAME


def _level(value: str, default: str) -> str:
    level = value.strip().upper()
    if level not in _VALID_LOG_LEVELS:
        logger.warning("Invalid log level '%s', using %s", value, default)
        return default
    return level


class ConfigManager:
    """Load Settings from the INI file and the environment."""

    def __init__(
        self,
        config_dir: Path | None = None,
        env: Mapping[str, str] | None = None,
        token_store: KeyringTokenStore | None = None,
    ) -> None:
        """Initialize config manager.

        Args:
            config_dir: Directory holding settings.conf
                (defaults to GLR_CONFIG_DIR or ~/.config/glr)
            env: Environment mapping (defaults to os.environ)
            token_store: Fallback token source (defaults to keyring)

        """
        self.env = os.environ if env is None else env
        self.config_dir = config_dir or default_config_dir(self.env)
        self.settings_file = self.config_dir / CONFIG_FILE_NAME
        self.token_store = token_store or KeyringTokenStore()

    def _read_ini(self) -> configparser.ConfigParser:
        config = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )
        if self.settings_file.is_file():
            try:
                config.read(self.settings_file, encoding="utf-8")
            except configparser.Error as e:
                logger.warning(
                    "Ignoring unreadable config %s: %s", self.settings_file, e
                )
                return configparser.ConfigParser(interpolation=None)
            logger.debug("Loaded settings from %s", self.settings_file)
        return config

    def load_settings(self) -> Settings:
        """Resolve settings from defaults, INI file and environment.

        Returns:
            Resolved Settings

        """
        ini = self._read_ini()
        defaults = ini[SECTION_DEFAULT]

        api_url = (
            self.env.get(ENV_API_URL)
            or ini.get(SECTION_GITLAB, KEY_API_URL, fallback="")
            or DEFAULT_GITLAB_API_URL
        ).rstrip("/")
        base_url = (
            self.env.get(ENV_BASE_URL)
            or ini.get(SECTION_GITLAB, KEY_BASE_URL, fallback="")
            or derive_base_url(api_url)
        ).rstrip("/")

        try:
            timeout_seconds = ini.getint(
                SECTION_NETWORK,
                KEY_TIMEOUT_SECONDS,
                fallback=DEFAULT_TIMEOUT_SECONDS,
            )
        except ValueError:
            logger.warning(
                "Invalid %s, using %s",
                KEY_TIMEOUT_SECONDS,
                DEFAULT_TIMEOUT_SECONDS,
            )
            timeout_seconds = DEFAULT_TIMEOUT_SECONDS

        log_file_value = defaults.get(KEY_LOG_FILE, "").strip()

        token = self.env.get(ENV_TOKEN) or self.token_store.get()

        return Settings(
            api_url=api_url,
            base_url=base_url,
            token=token or None,
            timeout_seconds=timeout_seconds,
            console_log_level=_level(
                defaults.get(KEY_CONSOLE_LOG_LEVEL, DEFAULT_CONSOLE_LOG_LEVEL),
                DEFAULT_CONSOLE_LOG_LEVEL,
            ),
            log_level=_level(
                defaults.get(KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL),
                DEFAULT_LOG_LEVEL,
            ),
            log_file=Path(log_file_value).expanduser()
            if log_file_value
            else None,
        )
