"""Creation of the release record."""

from gitlab_release.exceptions import PublishError
from gitlab_release.gitlab import AssetLink, GitLabClient, GitLabError, Release
from gitlab_release.logger import get_logger

logger = get_logger(__name__)


class ReleasePublisher:
    """Create a release with all its asset links in a single request."""

    def __init__(self, client: GitLabClient) -> None:
        """Initialize the publisher with a GitLab API client."""
        self.client = client

    async def publish(
        self,
        project_id: int,
        *,
        title: str,
        description: str,
        tag: str,
        links: list[AssetLink],
    ) -> Release:
        """Create the release.

        Args:
            project_id: Numeric project ID
            title: Release title
            description: Release description
            tag: Existing tag the release is attached to
            links: Asset links, in display order

        Returns:
            The created release

        Raises:
            PublishError: If GitLab rejects the request or it cannot be sent

        """
        logger.debug(
            "Creating release %s with %d asset link(s)", tag, len(links)
        )
        try:
            release = await self.client.create_release(
                project_id,
                name=title,
                tag=tag,
                description=description,
                links=links,
            )
        except GitLabError as e:
            raise PublishError(str(e), target=tag, cause=e) from e

        logger.info("Created release %s", tag)
        return release
