"""Release publication workflow.

Steps, strictly in order; any failure ends the run:

1. resolve the project from the repository origin URL
2. collect assets: resolve local files and upload them (if ``upload_path``)
3. append the explicit asset (if both name and URL are given)
4. delete the existing release (if ``replace``)
5. create the release
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from gitlab_release.assets import collect_local_assets
from gitlab_release.exceptions import ResolveError
from gitlab_release.gitlab import (
    AssetLink,
    GitLabAPIError,
    GitLabClient,
    GitLabError,
    Project,
    Release,
)
from gitlab_release.logger import get_logger
from gitlab_release.publisher import ReleasePublisher
from gitlab_release.replacer import ReleaseReplacer
from gitlab_release.repository import ProjectRef, parse_project_ref
from gitlab_release.uploader import AssetUploader

logger = get_logger(__name__)

HTTP_OK = 200


@dataclass(slots=True, frozen=True)
class ReleaseOptions:
    """Caller input for one release run.

    Title and description default to the tag when left empty.
    """

    tag: str
    title: str = ""
    description: str = ""
    upload_path: Path | None = None
    asset_name: str = ""
    asset_url: str = ""
    replace: bool = False

    def __post_init__(self) -> None:
        """Fill title and description from the tag."""
        if not self.title:
            object.__setattr__(self, "title", self.tag)
        if not self.description:
            object.__setattr__(self, "description", self.tag)


@dataclass(slots=True, frozen=True)
class PublishedRelease:
    """Outcome of a successful run."""

    project_ref: ProjectRef
    project: Project
    release: Release
    title: str
    tag: str
    links: list[AssetLink] = field(default_factory=list)
    replaced: Release | None = None


class ReleaseWorkflow:
    """Sequence resolve, upload, replace and publish for one release."""

    def __init__(self, client: GitLabClient, base_url: str) -> None:
        """Initialize the workflow.

        Args:
            client: GitLab API client
            base_url: GitLab web base URL used for uploaded asset URLs

        """
        self.client = client
        self.uploader = AssetUploader(client, base_url)
        self.replacer = ReleaseReplacer(client)
        self.publisher = ReleasePublisher(client)

    async def resolve_project(
        self, origin_url: str
    ) -> tuple[ProjectRef, Project]:
        """Map the origin URL to a project reference and fetch the project.

        Raises:
            OriginParseError: If the URL has no ``owner/name`` suffix
            ResolveError: If the lookup fails or returns a non-200 status

        """
        project_ref = parse_project_ref(origin_url)
        try:
            project, status = await self.client.get_project(project_ref.path)
        except GitLabError as e:
            raise ResolveError(
                str(e), target=project_ref.path, cause=e
            ) from e

        if status != HTTP_OK:
            error = GitLabAPIError(status, "unexpected status")
            raise ResolveError(
                str(error), target=project_ref.path, cause=error
            )

        logger.debug("Resolved %s to project id %s", project_ref, project.id)
        return project_ref, project

    async def collect_assets(
        self,
        project_ref: ProjectRef,
        project: Project,
        upload_path: Path,
    ) -> list[AssetLink]:
        """Resolve local files under ``upload_path`` and upload them.

        Raises:
            PathError: If the path cannot be read
            UploadError: If any upload fails

        """
        files = collect_local_assets(upload_path)
        return await self.uploader.upload_all(
            project.id, project_ref.path, files
        )

    @staticmethod
    def explicit_asset(options: ReleaseOptions) -> AssetLink | None:
        """Return the explicit asset link, if both name and URL are given."""
        if options.asset_name and options.asset_url:
            return AssetLink(name=options.asset_name, url=options.asset_url)
        if options.asset_name or options.asset_url:
            logger.warning(
                "Both -asset-name and -asset-url are required; "
                "skipping explicit asset"
            )
        return None

    async def run(
        self, origin_url: str, options: ReleaseOptions
    ) -> PublishedRelease:
        """Run the whole workflow.

        Args:
            origin_url: Remote URL of the local repository
            options: Release options

        Returns:
            Description of the created release

        Raises:
            ReleaseToolError: Subclass matching the failed step

        """
        project_ref, project = await self.resolve_project(origin_url)

        links: list[AssetLink] = []
        if options.upload_path is not None:
            links = await self.collect_assets(
                project_ref, project, options.upload_path
            )

        explicit = self.explicit_asset(options)
        if explicit is not None:
            links.append(explicit)

        replaced = None
        if options.replace:
            replaced = await self.replacer.replace(project.id, options.tag)

        release = await self.publisher.publish(
            project.id,
            title=options.title,
            description=options.description,
            tag=options.tag,
            links=links,
        )

        return PublishedRelease(
            project_ref=project_ref,
            project=project,
            release=release,
            title=options.title,
            tag=options.tag,
            links=links,
            replaced=replaced,
        )
