"""Tests for the concurrent asset uploader."""

import asyncio
from pathlib import Path

import pytest

from gitlab_release.exceptions import UploadError
from gitlab_release.gitlab import (
    AssetLink,
    GitLabAPIError,
    UploadedFile,
)
from gitlab_release.uploader import AssetUploader

BASE_URL = "https://gitlab.com"
PROJECT_PATH = "shiimaxx/glr-demo"


def _files(*names: str) -> list[Path]:
    return [Path("testdata") / name for name in names]


def test_asset_url():
    """Test asset URLs are base URL, project path and upload fragment."""
    uploader = AssetUploader(object(), BASE_URL + "/")
    url = uploader.asset_url(PROJECT_PATH, "/uploads/0123abcd/app.tar.gz")
    assert url == (
        "https://gitlab.com/shiimaxx/glr-demo/uploads/0123abcd/app.tar.gz"
    )


@pytest.mark.asyncio
async def test_upload_all_preserves_input_order(mock_client, project):
    """Test results follow input order, not completion order."""
    delays = {"first": 0.03, "second": 0.0, "third": 0.01}

    async def fake_upload(project_id, path):
        await asyncio.sleep(delays[path.name])
        return UploadedFile(alt=path.name, url=f"/uploads/s3cr3t/{path.name}")

    mock_client.upload_file.side_effect = fake_upload
    uploader = AssetUploader(mock_client, BASE_URL)

    links = await uploader.upload_all(
        project.id, PROJECT_PATH, _files("first", "second", "third")
    )

    assert links == [
        AssetLink(
            name=name,
            url=f"{BASE_URL}/{PROJECT_PATH}/uploads/s3cr3t/{name}",
        )
        for name in ("first", "second", "third")
    ]
    assert mock_client.upload_file.await_count == 3


@pytest.mark.asyncio
async def test_upload_all_uses_server_display_name(mock_client, project):
    """Test the link name is the display name GitLab returned."""
    mock_client.upload_file.return_value = UploadedFile(
        alt="renamed", url="/uploads/x/renamed"
    )
    uploader = AssetUploader(mock_client, BASE_URL)

    links = await uploader.upload_all(
        project.id, PROJECT_PATH, _files("original")
    )

    assert links[0].name == "renamed"


@pytest.mark.asyncio
async def test_upload_all_empty(mock_client, project):
    """Test no files means no uploads."""
    uploader = AssetUploader(mock_client, BASE_URL)

    assert await uploader.upload_all(project.id, PROJECT_PATH, []) == []
    mock_client.upload_file.assert_not_called()


@pytest.mark.asyncio
async def test_upload_all_fails_on_first_error(mock_client, project):
    """Test one failing upload fails the batch without a partial list."""
    failure = GitLabAPIError(413, "file too large")

    async def fake_upload(project_id, path):
        if path.name == "big":
            raise failure
        return UploadedFile(alt=path.name, url=f"/uploads/s/{path.name}")

    mock_client.upload_file.side_effect = fake_upload
    uploader = AssetUploader(mock_client, BASE_URL)

    with pytest.raises(UploadError) as exc_info:
        await uploader.upload_all(
            project.id, PROJECT_PATH, _files("small", "big", "other")
        )

    assert exc_info.value.cause is failure
    assert exc_info.value.target == "big"
    assert mock_client.upload_file.await_count == 3


@pytest.mark.asyncio
async def test_in_flight_uploads_are_not_cancelled(mock_client, project):
    """Test uploads still running after a failure complete normally."""
    finished = asyncio.Event()

    async def fake_upload(project_id, path):
        if path.name == "broken":
            raise OSError("permission denied")
        await asyncio.sleep(0.02)
        finished.set()
        return UploadedFile(alt=path.name, url=f"/uploads/s/{path.name}")

    mock_client.upload_file.side_effect = fake_upload
    uploader = AssetUploader(mock_client, BASE_URL)

    with pytest.raises(UploadError) as exc_info:
        await uploader.upload_all(
            project.id, PROJECT_PATH, _files("slow", "broken")
        )

    assert isinstance(exc_info.value.cause, OSError)
    assert not finished.is_set()
    await asyncio.wait_for(finished.wait(), timeout=1)
