"""Pytest configuration and fixtures for gitlab-release tests."""

import logging
from unittest.mock import MagicMock

import pytest

from gitlab_release.gitlab import GitLabClient, Project


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("gitlab_release"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """Keep tests away from the user's GitLab settings and token."""
    for var in ("GITLAB_API", "GITLAB_URL", "GITLAB_TOKEN", "GLR_LOG_DIR"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("GLR_CONFIG_DIR", str(tmp_path / "config"))


@pytest.fixture
def mock_client():
    """Provide a GitLabClient mock whose API methods are AsyncMocks."""
    return MagicMock(spec=GitLabClient)


@pytest.fixture
def project():
    """Return the project the tests publish to."""
    return Project(
        id=18630472,
        name="glr-demo",
        path_with_namespace="shiimaxx/glr-demo",
        web_url="https://gitlab.com/shiimaxx/glr-demo",
    )
