"""CLI argument parser for gitlab-release.

Flags use the single-dash long form (``-name``, ``-asset-url``); the
double-dash spelling is accepted as well.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence
from typing import NoReturn

from gitlab_release.exceptions import CLIParseError


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting on bad input."""

    def error(self, message: str) -> NoReturn:
        raise CLIParseError(message)


class CLIParser:
    """Command-line argument parser for glr."""

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments without the program name (defaults to sys.argv)

        Returns:
            Parsed arguments namespace. ``tag`` is None when omitted so
            that ``-version`` works on its own.

        Raises:
            CLIParseError: On unknown flags or missing flag values

        """
        parser = self._create_parser()
        return parser.parse_args(argv)

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = _RaisingArgumentParser(
            prog="glr",
            usage="%(prog)s [options] TAG",
            description="glr is a tool for creating GitLab Release.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            allow_abbrev=False,
            epilog="""
Environment:
  GITLAB_TOKEN   Access token used for API requests
  GITLAB_API     API endpoint (default: https://gitlab.com/api/v4)
  GITLAB_URL     Web endpoint used in asset URLs (default: derived from API)

Examples:
  # Release v1.2.3, uploading everything under dist/
  %(prog)s -upload dist v1.2.3

  # Recreate an existing release with a title and an external asset
  %(prog)s -replace -n "First release" -asset-name bin \\
      -asset-url https://example.com/bin v1.2.3
            """,
        )
        self._add_release_options(parser)
        self._add_global_options(parser)
        parser.add_argument(
            "tag",
            nargs="?",
            metavar="TAG",
            help="Set exists tag name.",
        )
        return parser

    def _add_release_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "-name",
            "-n",
            "--name",
            dest="name",
            default="",
            help="Set release title. Default is TAG.",
        )
        parser.add_argument(
            "-body",
            "-b",
            "--body",
            dest="body",
            default="",
            help="Set description for release. Default is TAG.",
        )
        parser.add_argument(
            "-asset-url",
            "--asset-url",
            dest="asset_url",
            default="",
            help="Set asset url.",
        )
        parser.add_argument(
            "-asset-name",
            "--asset-name",
            dest="asset_name",
            default="",
            help="Set asset name.",
        )
        parser.add_argument(
            "-upload",
            "--upload",
            dest="upload",
            default="",
            help="Set local asset path.",
        )
        parser.add_argument(
            "-replace",
            "--replace",
            dest="replace",
            action="store_true",
            help="Replace when GitLab Release is already exists.",
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "-version",
            "--version",
            dest="version",
            action="store_true",
            help="Print version.",
        )
        parser.add_argument(
            "-verbose",
            "--verbose",
            dest="verbose",
            action="store_true",
            help="Show debug output.",
        )
