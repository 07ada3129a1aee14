"""Local repository helpers.

Reads the origin remote URL of the current git repository and turns it
into the ``owner/name`` project reference used to address GitLab.
"""

from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass
from pathlib import Path

from gitlab_release.exceptions import OriginParseError, ResolveError
from gitlab_release.logger import get_logger

logger = get_logger(__name__)

# Trailing "owner/name" with optional ".git"; works for both
# https://host/owner/name.git and git@host:owner/name.git
REPO_URL_PATTERN = re.compile(r"([^/:]+)/([^/]+?)(?:\.git)?$")


@dataclass(slots=True, frozen=True)
class ProjectRef:
    """Owner/name pair identifying a remote project."""

    owner: str
    name: str

    @property
    def path(self) -> str:
        """Return the ``owner/name`` project path."""
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        """Return the project path."""
        return self.path


def parse_project_ref(remote_url: str) -> ProjectRef:
    """Extract the project reference from a remote URL.

    Args:
        remote_url: Remote URL, e.g. ``git@gitlab.com:owner/repo.git``

    Returns:
        Parsed project reference

    Raises:
        OriginParseError: If the URL does not end in ``owner/name``

    """
    match = REPO_URL_PATTERN.search(remote_url.strip())
    if match is None:
        raise OriginParseError(
            "origin url does not end in owner/name", target=remote_url
        )
    return ProjectRef(owner=match.group(1), name=match.group(2))


def get_origin_url(cwd: Path | None = None) -> str:
    """Return the URL of the ``origin`` remote of the repository at ``cwd``.

    Raises:
        ResolveError: If git is missing or no origin remote is configured

    """
    try:
        result = subprocess.run(
            ["git", "config", "--get", "remote.origin.url"],  # noqa: S607
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as e:
        raise ResolveError("git executable not found", cause=e) from e
    except subprocess.CalledProcessError as e:
        raise ResolveError(
            "fetch origin url failed: no origin remote configured", cause=e
        ) from e

    url = result.stdout.strip()
    if not url:
        raise ResolveError("fetch origin url failed: empty origin url")
    logger.debug("Origin url: %s", url)
    return url
