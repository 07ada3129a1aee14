"""Main CLI entry point for gitlab-release (``glr``)."""

import sys
from collections.abc import Sequence

import uvloop

from gitlab_release.cli import CLIRunner
from gitlab_release.constants import EXIT_ERROR
from gitlab_release.logger import get_logger

logger = get_logger(__name__)


async def async_main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI asynchronously and return its exit code."""
    logger.debug("CLI started")
    runner = CLIRunner()
    exit_code = await runner.run(argv)
    logger.debug("CLI finished with exit code %d", exit_code)
    return exit_code


def main() -> None:
    """Run the CLI application on a uvloop event loop."""
    try:
        exit_code = uvloop.run(async_main())
    except KeyboardInterrupt:
        print("\n⏹️  Operation cancelled by user")
        sys.exit(1)
    except Exception:
        logger.exception("❌ Unexpected error")
        sys.exit(EXIT_ERROR)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
