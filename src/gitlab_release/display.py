"""Release summary output.

Printed with print() so the summary shows on stdout regardless of the
logger configuration.
"""
# ruff: noqa: T201

import sys
from typing import TextIO

from gitlab_release.workflow import PublishedRelease


def format_release_summary(published: PublishedRelease) -> list[str]:
    """Return the summary lines for a created release."""
    lines = [
        "[Created release]",
        f"Project: {published.project_ref.path}",
        f"Title: {published.title}",
        f"Tag: {published.tag}",
    ]
    if published.replaced is not None:
        lines.append(
            f"Replaced previous release ({len(published.replaced.links)} "
            "asset link(s) removed)"
        )
    lines.append("Release assets:")
    lines.extend(f"--> {link.name}: {link.url}" for link in published.links)
    return lines


def print_release_summary(
    published: PublishedRelease, stream: TextIO | None = None
) -> None:
    """Print the summary of a created release.

    Args:
        published: Workflow outcome
        stream: Output stream (defaults to stdout)

    """
    out = stream or sys.stdout
    for line in format_release_summary(published):
        print(line, file=out)


def print_error(message: str, stream: TextIO | None = None) -> None:
    """Print an error message with icon to stderr."""
    print(f"❌ {message}", file=stream or sys.stderr)
