"""Local asset resolution.

Turns the ``-upload`` path into the ordered list of files to upload.
"""

import os
import stat
from pathlib import Path

from gitlab_release.exceptions import PathError
from gitlab_release.logger import get_logger

logger = get_logger(__name__)


def _is_hidden(path: Path) -> bool:
    return path.name.startswith(".")


def _walk(directory: Path) -> list[Path]:
    """Recursively list non-hidden, non-directory entries of ``directory``.

    Entries are visited in lexical order by name at every level, so
    subdirectory contents appear where the subdirectory sorts. Hidden
    directories are still descended into; only entry names are filtered.
    Symlinked directories are not followed.
    """
    files: list[Path] = []
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_symlink() and entry.is_dir():
            logger.debug("Skipping symlinked directory: %s", entry)
        elif entry.is_dir():
            files.extend(_walk(entry))
        elif not _is_hidden(entry):
            files.append(entry)
    return files


def collect_local_assets(root: str | os.PathLike[str]) -> list[Path]:
    """Resolve an upload path into the files to upload.

    Args:
        root: A file or a directory

    Returns:
        ``[root]`` for a file, or every non-hidden file below a directory
        in deterministic walk order. Paths keep the form the caller gave
        (a relative root yields relative paths).

    Raises:
        PathError: If the path cannot be stat'ed or a directory cannot
            be listed

    """
    root_path = Path(root)
    absolute = root_path.absolute()
    try:
        stat_result = absolute.stat()
    except OSError as e:
        raise PathError(
            "get file stat failed", target=str(root), cause=e
        ) from e

    if not stat.S_ISDIR(stat_result.st_mode):
        logger.debug("Upload path is a single file: %s", root_path)
        return [root_path]

    try:
        files = _walk(root_path)
    except OSError as e:
        raise PathError(
            "list directory failed", target=str(root), cause=e
        ) from e

    logger.debug("Found %d file(s) under %s", len(files), root_path)
    return files
