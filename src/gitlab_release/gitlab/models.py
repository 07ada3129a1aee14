"""GitLab API data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True, frozen=True)
class Project:
    """Remote project record.

    Attributes:
        id: Numeric project ID used to address project endpoints
        name: Project name
        path_with_namespace: Full ``owner/name`` path
        web_url: Browser URL of the project

    """

    id: int
    name: str
    path_with_namespace: str = ""
    web_url: str = ""

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> Project:
        """Create Project from GitLab API response data.

        Raises:
            ValueError: If the response carries no project id

        """
        project_id = data.get("id")
        if project_id is None:
            msg = "project response has no id"
            raise ValueError(msg)
        return cls(
            id=int(project_id),
            name=data.get("name", ""),
            path_with_namespace=data.get("path_with_namespace", ""),
            web_url=data.get("web_url", ""),
        )


@dataclass(slots=True, frozen=True)
class AssetLink:
    """A (display name, URL) pair attached to a release."""

    name: str
    url: str

    def to_api(self) -> dict[str, str]:
        """Return the link as a create-release payload entry."""
        return {"name": self.name, "url": self.url}


@dataclass(slots=True, frozen=True)
class ReleaseLink:
    """An asset link that already exists on a remote release."""

    id: int
    name: str
    url: str

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> ReleaseLink:
        """Create ReleaseLink from GitLab API response data."""
        return cls(
            id=int(data["id"]),
            name=data.get("name", ""),
            url=data.get("url", ""),
        )


@dataclass(slots=True, frozen=True)
class Release:
    """A GitLab release with its asset links.

    Attributes:
        tag_name: Tag the release is attached to
        name: Release title
        description: Free-text description
        links: Asset links in the order GitLab returned them

    """

    tag_name: str
    name: str
    description: str
    links: list[ReleaseLink] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> Release:
        """Create Release from GitLab API response data."""
        assets = data.get("assets") or {}
        links = [
            ReleaseLink.from_api_response(link)
            for link in assets.get("links") or []
            if isinstance(link, dict) and "id" in link
        ]
        return cls(
            tag_name=data.get("tag_name", ""),
            name=data.get("name") or "",
            description=data.get("description") or "",
            links=links,
        )


@dataclass(slots=True, frozen=True)
class UploadedFile:
    """Response of a project file upload.

    Attributes:
        alt: Display name GitLab assigned (the file base name)
        url: Path fragment relative to the project URL,
            e.g. ``/uploads/<secret>/app.tar.gz``
        full_path: Path of the upload relative to the instance root
        markdown: Markdown snippet linking the upload

    """

    alt: str
    url: str
    full_path: str = ""
    markdown: str = ""

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> UploadedFile:
        """Create UploadedFile from GitLab API response data.

        Raises:
            ValueError: If the response carries no url

        """
        url = data.get("url")
        if not url:
            msg = "upload response has no url"
            raise ValueError(msg)
        return cls(
            alt=data.get("alt", ""),
            url=url,
            full_path=data.get("full_path", ""),
            markdown=data.get("markdown", ""),
        )
