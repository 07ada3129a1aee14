"""CLI runner for gitlab-release.

Parses arguments, loads settings, wires the GitLab client into the
release workflow and maps failures to process exit codes.
"""

from collections.abc import Callable, Sequence
from pathlib import Path

from gitlab_release import __version__
from gitlab_release.auth import GitLabAuthManager
from gitlab_release.config import ConfigManager, Settings
from gitlab_release.constants import EXIT_ERROR, EXIT_OK
from gitlab_release.display import print_error, print_release_summary
from gitlab_release.exceptions import CLIParseError, ReleaseToolError
from gitlab_release.gitlab import GitLabClient
from gitlab_release.http_session import create_http_session
from gitlab_release.logger import (
    get_logger,
    reconfigure_logging,
    set_console_level,
)
from gitlab_release.repository import get_origin_url
from gitlab_release.workflow import ReleaseOptions, ReleaseWorkflow

from .parser import CLIParser

logger = get_logger(__name__)


class CLIRunner:
    """Run one glr invocation."""

    def __init__(
        self,
        config_manager: ConfigManager | None = None,
        origin_resolver: Callable[[], str] = get_origin_url,
    ) -> None:
        """Initialize CLI runner.

        Args:
            config_manager: Settings loader (defaults to env + settings.conf)
            origin_resolver: Returns the origin URL of the local repository

        """
        self.config_manager = config_manager or ConfigManager()
        self.origin_resolver = origin_resolver

    async def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the CLI application.

        Args:
            argv: Arguments without the program name (defaults to sys.argv)

        Returns:
            Process exit code

        """
        try:
            args = CLIParser().parse_args(argv)
        except CLIParseError as e:
            print_error(str(e))
            return e.exit_code

        if args.version:
            print(f"glr version {__version__}")
            return EXIT_OK

        if not args.tag:
            error = CLIParseError("Missing arguments: TAG is required")
            print_error(str(error))
            return error.exit_code

        settings = self.config_manager.load_settings()
        self._setup_logging(settings, verbose=args.verbose)

        options = ReleaseOptions(
            tag=args.tag,
            title=args.name,
            description=args.body,
            upload_path=Path(args.upload) if args.upload else None,
            asset_name=args.asset_name,
            asset_url=args.asset_url,
            replace=args.replace,
        )

        try:
            origin_url = self.origin_resolver()
            await self._publish(settings, origin_url, options)
        except ReleaseToolError as e:
            logger.debug("Release failed (%s)", e.kind.value, exc_info=True)
            print_error(str(e))
            return e.exit_code
        except Exception as e:
            logger.exception("Unexpected error")
            print_error(f"Unexpected error: {e}")
            return EXIT_ERROR

        return EXIT_OK

    async def _publish(
        self, settings: Settings, origin_url: str, options: ReleaseOptions
    ) -> None:
        async with create_http_session(settings) as session:
            client = GitLabClient(
                session,
                settings.api_url,
                GitLabAuthManager(settings.token),
            )
            workflow = ReleaseWorkflow(client, settings.base_url)
            published = await workflow.run(origin_url, options)
        print_release_summary(published)

    @staticmethod
    def _setup_logging(settings: Settings, *, verbose: bool) -> None:
        reconfigure_logging(
            settings.console_log_level,
            settings.log_level,
            settings.log_file,
        )
        if verbose:
            set_console_level("DEBUG")
