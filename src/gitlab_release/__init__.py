"""Top-level package for gitlab-release.

Create GitLab releases from the command line, uploading local files as
release assets.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gitlab-release")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
