"""Tests for deleting an existing release."""

from unittest.mock import call

import pytest

from gitlab_release.exceptions import ReplaceError
from gitlab_release.gitlab import (
    GitLabAPIError,
    GitLabNotFoundError,
    Release,
    ReleaseLink,
)
from gitlab_release.replacer import ReleaseReplacer

TAG = "v1.2.3"


@pytest.fixture
def existing_release():
    """Return a release with two asset links."""
    return Release(
        tag_name=TAG,
        name="old title",
        description="old notes",
        links=[
            ReleaseLink(id=11, name="linux", url="https://x/linux"),
            ReleaseLink(id=12, name="darwin", url="https://x/darwin"),
        ],
    )


@pytest.mark.asyncio
async def test_replace_deletes_links_then_release(
    mock_client, project, existing_release
):
    """Test every link is deleted, in order, before the release."""
    mock_client.get_release.return_value = existing_release
    replacer = ReleaseReplacer(mock_client)

    result = await replacer.replace(project.id, TAG)

    assert result is existing_release
    assert mock_client.delete_release_link.await_args_list == [
        call(project.id, TAG, 11),
        call(project.id, TAG, 12),
    ]
    mock_client.delete_release.assert_awaited_once_with(project.id, TAG)

    names = [c[0] for c in mock_client.method_calls]
    assert names == [
        "get_release",
        "delete_release_link",
        "delete_release_link",
        "delete_release",
    ]


@pytest.mark.asyncio
async def test_replace_without_links(mock_client, project):
    """Test a release without links is deleted directly."""
    mock_client.get_release.return_value = Release(
        tag_name=TAG, name=TAG, description=TAG
    )
    replacer = ReleaseReplacer(mock_client)

    await replacer.replace(project.id, TAG)

    mock_client.delete_release_link.assert_not_called()
    mock_client.delete_release.assert_awaited_once_with(project.id, TAG)


@pytest.mark.asyncio
async def test_replace_missing_release(mock_client, project):
    """Test a missing release surfaces as ReplaceError with a 404 cause."""
    not_found = GitLabNotFoundError(404, "404 Not found")
    mock_client.get_release.side_effect = not_found
    replacer = ReleaseReplacer(mock_client)

    with pytest.raises(ReplaceError) as exc_info:
        await replacer.replace(project.id, TAG)

    assert exc_info.value.cause is not_found
    assert exc_info.value.target == TAG
    mock_client.delete_release.assert_not_called()


@pytest.mark.asyncio
async def test_replace_stops_on_link_failure(
    mock_client, project, existing_release
):
    """Test a failed link deletion aborts without touching the release."""
    mock_client.get_release.return_value = existing_release
    mock_client.delete_release_link.side_effect = [
        None,
        GitLabAPIError(403, "403 Forbidden"),
    ]
    replacer = ReleaseReplacer(mock_client)

    with pytest.raises(ReplaceError, match="darwin"):
        await replacer.replace(project.id, TAG)

    assert mock_client.delete_release_link.await_count == 2
    mock_client.delete_release.assert_not_called()


@pytest.mark.asyncio
async def test_replace_release_delete_failure(
    mock_client, project, existing_release
):
    """Test a failed release deletion leaves deleted links deleted."""
    mock_client.get_release.return_value = existing_release
    mock_client.delete_release.side_effect = GitLabAPIError(500, "oops")
    replacer = ReleaseReplacer(mock_client)

    with pytest.raises(ReplaceError, match="delete release failed"):
        await replacer.replace(project.id, TAG)

    assert mock_client.delete_release_link.await_count == 2
