"""HTTP session utilities for gitlab-release."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from gitlab_release.config import Settings


@asynccontextmanager
async def create_http_session(
    settings: Settings,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Create configured HTTP session.

    Uploads can be large, so the total timeout is generous while connect
    and read stalls are bounded by ``timeout_seconds``.

    Args:
        settings: Resolved settings

    Yields:
        Configured aiohttp.ClientSession

    """
    timeout = aiohttp.ClientTimeout(
        total=settings.timeout_seconds * 60,
        sock_read=settings.timeout_seconds * 3,
        sock_connect=settings.timeout_seconds,
    )
    async with aiohttp.ClientSession(timeout=timeout) as session:
        yield session
