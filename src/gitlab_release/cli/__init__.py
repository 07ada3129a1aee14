"""Command-line interface for gitlab-release."""

from gitlab_release.cli.parser import CLIParser
from gitlab_release.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
