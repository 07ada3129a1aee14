"""GitLab infrastructure - REST client, models and errors."""

from gitlab_release.gitlab.client import GitLabClient
from gitlab_release.gitlab.errors import (
    GitLabAPIError,
    GitLabConnectionError,
    GitLabError,
    GitLabNotFoundError,
)
from gitlab_release.gitlab.models import (
    AssetLink,
    Project,
    Release,
    ReleaseLink,
    UploadedFile,
)

__all__ = [
    "AssetLink",
    "GitLabAPIError",
    "GitLabClient",
    "GitLabConnectionError",
    "GitLabError",
    "GitLabNotFoundError",
    "Project",
    "Release",
    "ReleaseLink",
    "UploadedFile",
]
