"""Tests for release summary output."""

import io

from gitlab_release.display import (
    format_release_summary,
    print_error,
    print_release_summary,
)
from gitlab_release.gitlab import AssetLink, Release, ReleaseLink
from gitlab_release.repository import ProjectRef
from gitlab_release.workflow import PublishedRelease


def make_published(project, **overrides):
    values = {
        "project_ref": ProjectRef("shiimaxx", "glr-demo"),
        "project": project,
        "release": Release(tag_name="v1.2.3", name="First", description=""),
        "title": "First",
        "tag": "v1.2.3",
        "links": [
            AssetLink(
                name="glr-demo_linux_amd64",
                url="https://gitlab.com/shiimaxx/glr-demo/uploads/a1/"
                "glr-demo_linux_amd64",
            ),
            AssetLink(name="docs", url="https://docs.example.com"),
        ],
    }
    values.update(overrides)
    return PublishedRelease(**values)


def test_format_release_summary(project):
    """Test the summary lists project, title, tag and every asset."""
    lines = format_release_summary(make_published(project))

    assert lines == [
        "[Created release]",
        "Project: shiimaxx/glr-demo",
        "Title: First",
        "Tag: v1.2.3",
        "Release assets:",
        "--> glr-demo_linux_amd64: https://gitlab.com/shiimaxx/glr-demo/"
        "uploads/a1/glr-demo_linux_amd64",
        "--> docs: https://docs.example.com",
    ]


def test_format_replaced_release(project):
    """Test a replaced release reports how many links were removed."""
    old = Release(
        tag_name="v1.2.3",
        name="old",
        description="",
        links=[
            ReleaseLink(id=1, name="a", url="u"),
            ReleaseLink(id=2, name="b", url="v"),
        ],
    )

    lines = format_release_summary(make_published(project, replaced=old))

    assert "Replaced previous release (2 asset link(s) removed)" in lines


def test_format_without_assets(project):
    """Test the asset header is printed even with no assets."""
    lines = format_release_summary(make_published(project, links=[]))

    assert lines[-1] == "Release assets:"


def test_print_release_summary(project):
    """Test the summary is written one line at a time."""
    stream = io.StringIO()

    print_release_summary(make_published(project), stream)

    assert stream.getvalue().splitlines()[0] == "[Created release]"


def test_print_error():
    """Test errors are prefixed with an icon."""
    stream = io.StringIO()

    print_error("Upload files failed: boom", stream)

    assert stream.getvalue() == "❌ Upload files failed: boom\n"
