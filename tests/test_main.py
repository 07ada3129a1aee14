"""Tests for the main entry point."""

from unittest.mock import AsyncMock, patch

import pytest

from gitlab_release import main as main_module


@pytest.mark.asyncio
async def test_async_main_runs_cli():
    """Test async_main delegates to CLIRunner and returns its code."""
    with patch("gitlab_release.main.CLIRunner") as runner_cls:
        runner_cls.return_value.run = AsyncMock(return_value=12)

        exit_code = await main_module.async_main(["v1"])

    assert exit_code == 12
    runner_cls.return_value.run.assert_awaited_once_with(["v1"])


def test_main_exits_with_code():
    """Test main exits with the code returned from the event loop."""

    def fake_run(coro):
        coro.close()
        return 0

    with (
        patch("gitlab_release.main.uvloop.run", side_effect=fake_run),
        pytest.raises(SystemExit) as exc_info,
    ):
        main_module.main()

    assert exc_info.value.code == 0


def test_main_keyboard_interrupt(capsys):
    """Test Ctrl+C exits with 1 and a short message."""

    def interrupted(coro):
        coro.close()
        raise KeyboardInterrupt

    with (
        patch("gitlab_release.main.uvloop.run", side_effect=interrupted),
        pytest.raises(SystemExit) as exc_info,
    ):
        main_module.main()

    assert exc_info.value.code == 1
    assert "Operation cancelled by user" in capsys.readouterr().out


def test_main_unexpected_error():
    """Test unexpected failures exit with the generic error code."""

    def broken(coro):
        coro.close()
        raise RuntimeError("loop failure")

    with (
        patch("gitlab_release.main.uvloop.run", side_effect=broken),
        pytest.raises(SystemExit) as exc_info,
    ):
        main_module.main()

    assert exc_info.value.code == 10
