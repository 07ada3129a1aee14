"""Concurrent upload of local files as release assets."""

import asyncio
from pathlib import Path

from gitlab_release.exceptions import UploadError
from gitlab_release.gitlab import AssetLink, GitLabClient, GitLabError
from gitlab_release.logger import get_logger

logger = get_logger(__name__)


class AssetUploader:
    """Upload local files to a project and build their asset links.

    All uploads start at once, one task per file. Results are stored by
    input index, so the returned links follow the input order whatever
    order the uploads finish in.

    The first failing upload fails the whole batch. Uploads still in
    flight at that point are left to finish on their own and their
    results are dropped.
    """

    def __init__(self, client: GitLabClient, base_url: str) -> None:
        """Initialize the uploader.

        Args:
            client: GitLab API client
            base_url: GitLab web base URL, prefix of the asset URLs

        """
        self.client = client
        self.base_url = base_url.rstrip("/")

    def asset_url(self, project_path: str, fragment: str) -> str:
        """Build the public URL of an uploaded file.

        Args:
            project_path: ``owner/name`` project path
            fragment: URL fragment returned by the upload, starting with /

        """
        return f"{self.base_url}/{project_path}{fragment}"

    async def upload_all(
        self,
        project_id: int,
        project_path: str,
        files: list[Path],
    ) -> list[AssetLink]:
        """Upload every file concurrently.

        Args:
            project_id: Numeric project ID
            project_path: ``owner/name`` project path
            files: Files to upload, in the order links should appear

        Returns:
            One asset link per file, in input order

        Raises:
            UploadError: Wrapping the first upload failure

        """
        if not files:
            return []

        slots: list[AssetLink | None] = [None] * len(files)

        async def upload_one(index: int, path: Path) -> None:
            try:
                uploaded = await self.client.upload_file(project_id, path)
            except (GitLabError, OSError) as e:
                logger.debug("Upload of %s failed: %s", path, e)
                raise UploadError(str(e), target=path.name, cause=e) from e
            slots[index] = AssetLink(
                name=uploaded.alt,
                url=self.asset_url(project_path, uploaded.url),
            )
            logger.info("Uploaded %s", path.name)

        logger.info("Uploading %d file(s)", len(files))
        # Without return_exceptions the first error propagates right away
        # and the remaining tasks keep running un-cancelled.
        await asyncio.gather(
            *(upload_one(i, path) for i, path in enumerate(files))
        )

        return [link for link in slots if link is not None]
