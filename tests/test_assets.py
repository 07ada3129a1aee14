"""Tests for local asset resolution."""

from pathlib import Path

import pytest

from gitlab_release.assets import collect_local_assets
from gitlab_release.exceptions import ErrorKind, PathError


@pytest.fixture
def dist_dir(tmp_path: Path) -> Path:
    """Create a directory tree of build artefacts."""
    dist = tmp_path / "dist"
    dist.mkdir()
    (dist / "glr-demo_v1.2.3_linux_amd64").write_bytes(b"linux")
    (dist / "glr-demo_v1.2.3_darwin_amd64").write_bytes(b"darwin")
    (dist / ".DS_Store").write_bytes(b"")
    nested = dist / "checksums"
    nested.mkdir()
    (nested / "SHA256SUMS").write_text("abc  glr-demo\n")
    (nested / ".hidden").write_text("secret")
    return dist


def test_single_file(tmp_path):
    """Test a file path resolves to itself."""
    target = tmp_path / "app.tar.gz"
    target.write_bytes(b"data")

    assert collect_local_assets(target) == [target]


def test_directory_lexical_order(dist_dir):
    """Test directory contents come back in lexical walk order."""
    assets = collect_local_assets(dist_dir)

    assert assets == [
        dist_dir / "checksums" / "SHA256SUMS",
        dist_dir / "glr-demo_v1.2.3_darwin_amd64",
        dist_dir / "glr-demo_v1.2.3_linux_amd64",
    ]


def test_hidden_files_excluded(tmp_path):
    """Test only non-hidden files are returned."""
    (tmp_path / "a.tar.gz").write_bytes(b"a")
    (tmp_path / ".hidden").write_bytes(b"h")

    assert collect_local_assets(tmp_path) == [tmp_path / "a.tar.gz"]


def test_hidden_directory_contents_included(tmp_path):
    """Test hidden directories are still traversed."""
    hidden_dir = tmp_path / ".build"
    hidden_dir.mkdir()
    (hidden_dir / "artifact.zip").write_bytes(b"zip")

    assert collect_local_assets(tmp_path) == [hidden_dir / "artifact.zip"]


def test_directories_not_returned(dist_dir):
    """Test no directory appears in the result."""
    assert all(not p.is_dir() for p in collect_local_assets(dist_dir))


def test_relative_root_keeps_relative_paths(dist_dir, monkeypatch):
    """Test a relative root yields paths rooted at the same relative path."""
    monkeypatch.chdir(dist_dir.parent)

    assets = collect_local_assets("dist")

    assert assets[1] == Path("dist/glr-demo_v1.2.3_darwin_amd64")
    assert not assets[1].is_absolute()


def test_empty_directory(tmp_path):
    """Test an empty directory yields no assets."""
    assert collect_local_assets(tmp_path) == []


def test_missing_path(tmp_path):
    """Test a missing path raises PathError with the OS error as cause."""
    missing = tmp_path / "nope"

    with pytest.raises(PathError) as exc_info:
        collect_local_assets(missing)

    assert exc_info.value.kind is ErrorKind.PATH
    assert exc_info.value.target == str(missing)
    assert isinstance(exc_info.value.cause, FileNotFoundError)


def test_symlinked_directory_not_followed(dist_dir):
    """Test a link back to an ancestor does not repeat the walk."""
    (dist_dir / "self").symlink_to(dist_dir, target_is_directory=True)

    files = collect_local_assets(dist_dir)

    assert [p.name for p in files] == [
        "SHA256SUMS",
        "glr-demo_v1.2.3_darwin_amd64",
        "glr-demo_v1.2.3_linux_amd64",
    ]
