"""Deletion of an existing release before it is recreated."""

from gitlab_release.exceptions import ReplaceError
from gitlab_release.gitlab import GitLabClient, GitLabError, Release
from gitlab_release.logger import get_logger

logger = get_logger(__name__)


class ReleaseReplacer:
    """Delete the release for a tag together with its asset links.

    Links are deleted one by one before the release itself. A failure
    stops the sequence where it is: links already deleted stay deleted
    and the release may still exist. Nothing is rolled back.
    """

    def __init__(self, client: GitLabClient) -> None:
        """Initialize the replacer with a GitLab API client."""
        self.client = client

    async def replace(self, project_id: int, tag: str) -> Release:
        """Delete the existing release for ``tag``.

        Args:
            project_id: Numeric project ID
            tag: Tag of the release to delete

        Returns:
            The release as it was before deletion

        Raises:
            ReplaceError: If the release cannot be fetched (including when
                none exists) or any deletion fails

        """
        try:
            release = await self.client.get_release(project_id, tag)
        except GitLabError as e:
            raise ReplaceError(
                f"get release failed: {e}", target=tag, cause=e
            ) from e

        for link in release.links:
            try:
                await self.client.delete_release_link(project_id, tag, link.id)
            except GitLabError as e:
                raise ReplaceError(
                    f"delete release link '{link.name}' failed: {e}",
                    target=tag,
                    cause=e,
                ) from e
            logger.debug("Deleted release link %s (%s)", link.id, link.name)

        try:
            await self.client.delete_release(project_id, tag)
        except GitLabError as e:
            raise ReplaceError(
                f"delete release failed: {e}", target=tag, cause=e
            ) from e

        logger.info(
            "Deleted existing release %s (%d link(s))", tag, len(release.links)
        )
        return release
