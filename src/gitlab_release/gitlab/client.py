"""Low-level GitLab REST API v4 client.

Handles HTTP communication with GitLab: authentication headers, JSON
encoding with orjson, multipart uploads and mapping of status codes and
transport failures to ``gitlab.errors`` exceptions. No retries are made.
"""

from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any
from urllib.parse import quote

import aiofiles
import aiofiles.os
import aiohttp
import orjson

from gitlab_release.auth import GitLabAuthManager
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
    UploadedFile,
)
from gitlab_release.logger import get_logger

logger = get_logger(__name__)

HTTP_NOT_FOUND = 404
HTTP_BAD_REQUEST = 400
ERROR_PREVIEW_MAX = 200
UPLOAD_CHUNK_SIZE = 64 * 1024


def _encode(segment: str | int) -> str:
    """Percent-encode a single path segment (slashes included)."""
    return quote(str(segment), safe="")


async def read_file_chunks(
    path: Path, chunk_size: int = UPLOAD_CHUNK_SIZE
) -> AsyncIterator[bytes]:
    """Yield the contents of ``path`` in chunks of at most ``chunk_size``."""
    async with aiofiles.open(path, mode="rb") as f:
        while chunk := await f.read(chunk_size):
            yield chunk


def _parse_release(data: Any, context: str) -> Release:
    if not isinstance(data, dict):
        msg = f"unexpected release response for {context}"
        raise GitLabError(msg)
    try:
        return Release.from_api_response(data)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        msg = f"malformed release response for {context}: {e!r}"
        raise GitLabError(msg) from e


def _error_message(raw: bytes) -> str:
    """Extract a readable message from a GitLab error body."""
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw.decode("utf-8", errors="replace")[:ERROR_PREVIEW_MAX]
    if isinstance(data, dict):
        message = data.get("message") or data.get("error") or data
        return str(message)[:ERROR_PREVIEW_MAX]
    return str(data)[:ERROR_PREVIEW_MAX]


class GitLabClient:
    """Typed access to the GitLab project, upload and release endpoints."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        api_url: str,
        auth_manager: GitLabAuthManager,
    ) -> None:
        """Initialize the API client.

        Args:
            session: aiohttp session for making requests
            api_url: API base URL, e.g. https://gitlab.com/api/v4
            auth_manager: GitLab authentication manager

        """
        self.session = session
        self.api_url = api_url.rstrip("/")
        self.auth_manager = auth_manager

    def _url(self, *segments: str | int) -> str:
        return self.api_url + "/" + "/".join(_encode(s) for s in segments)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        json_body: dict[str, Any] | None = None,
        data: aiohttp.FormData | None = None,
    ) -> tuple[int, Any | None]:
        """Send a request and decode the JSON answer.

        Args:
            method: HTTP method
            url: Absolute request URL
            json_body: Payload to send as JSON
            data: Multipart form to send instead of JSON

        Returns:
            Tuple of (status code, decoded body or None when empty)

        Raises:
            GitLabNotFoundError: On 404
            GitLabAPIError: On any other status >= 400
            GitLabConnectionError: On transport failures and timeouts
            GitLabError: If a success body is not valid JSON

        """
        headers = self.auth_manager.apply_auth({"Accept": "application/json"})
        body: bytes | aiohttp.FormData | None = data
        if json_body is not None:
            headers["Content-Type"] = "application/json"
            body = orjson.dumps(json_body)

        logger.debug("%s %s", method, url)
        try:
            async with self.session.request(
                method, url, headers=headers, data=body
            ) as response:
                status = response.status
                raw = await response.read()
        except (aiohttp.ClientError, TimeoutError) as e:
            msg = f"{method} {url}: {e}"
            raise GitLabConnectionError(msg) from e

        if status == HTTP_NOT_FOUND:
            raise GitLabNotFoundError(status, _error_message(raw), url)
        if status >= HTTP_BAD_REQUEST:
            raise GitLabAPIError(status, _error_message(raw), url)

        if not raw:
            return status, None
        try:
            return status, orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            msg = f"invalid JSON in response from {url}"
            raise GitLabError(msg) from e

    async def get_project(self, path: str) -> tuple[Project, int]:
        """Fetch a project by its ``owner/name`` path.

        Args:
            path: Project path with namespace

        Returns:
            Tuple of (project, response status code)

        """
        status, data = await self._request("GET", self._url("projects", path))
        if not isinstance(data, dict):
            msg = f"unexpected project response for {path}"
            raise GitLabError(msg)
        try:
            return Project.from_api_response(data), status
        except ValueError as e:
            raise GitLabError(str(e)) from e

    async def upload_file(self, project_id: int, path: Path) -> UploadedFile:
        """Upload a local file to the project's uploads area.

        Args:
            project_id: Numeric project ID
            path: Local file to upload

        Returns:
            Upload description with display name and URL fragment

        Raises:
            OSError: If the local file cannot be read

        """
        size = (await aiofiles.os.stat(path)).st_size

        # The body is streamed from disk while the request is sent.
        form = aiohttp.FormData()
        form.add_field(
            "file",
            read_file_chunks(path),
            filename=path.name,
            content_type="application/octet-stream",
        )

        logger.debug("Uploading %s (%d bytes)", path, size)
        _, data = await self._request(
            "POST", self._url("projects", project_id, "uploads"), data=form
        )
        if not isinstance(data, dict):
            msg = f"unexpected upload response for {path.name}"
            raise GitLabError(msg)
        try:
            return UploadedFile.from_api_response(data)
        except ValueError as e:
            raise GitLabError(str(e)) from e

    async def get_release(self, project_id: int, tag: str) -> Release:
        """Fetch the release attached to ``tag``.

        Raises:
            GitLabNotFoundError: If no release exists for the tag

        """
        _, data = await self._request(
            "GET", self._url("projects", project_id, "releases", tag)
        )
        return _parse_release(data, tag)

    async def create_release(
        self,
        project_id: int,
        *,
        name: str,
        tag: str,
        description: str,
        links: list[AssetLink],
    ) -> Release:
        """Create a release with all its asset links in one request.

        Returns:
            The created release, or the submitted fields when GitLab
            returns an empty body

        """
        payload = {
            "name": name,
            "tag_name": tag,
            "description": description,
            "assets": {"links": [link.to_api() for link in links]},
        }
        _, data = await self._request(
            "POST",
            self._url("projects", project_id, "releases"),
            json_body=payload,
        )
        if data is None:
            return Release(tag_name=tag, name=name, description=description)
        return _parse_release(data, tag)

    async def delete_release(self, project_id: int, tag: str) -> None:
        """Delete the release attached to ``tag`` (the tag itself stays)."""
        await self._request(
            "DELETE", self._url("projects", project_id, "releases", tag)
        )

    async def delete_release_link(
        self, project_id: int, tag: str, link_id: int
    ) -> None:
        """Delete one asset link of the release attached to ``tag``."""
        await self._request(
            "DELETE",
            self._url(
                "projects",
                project_id,
                "releases",
                tag,
                "assets",
                "links",
                link_id,
            ),
        )
