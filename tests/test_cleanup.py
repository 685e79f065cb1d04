"""Tests for rollback of failed projects (create_frontend_app.cleanup).

``asyncio.sleep`` is patched so the backoff schedule is checked without
waiting.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, call, patch

import pytest

from create_frontend_app.cleanup import cleanup_failed_project

REMOVE = "create_frontend_app.cleanup.remove_directory"
SLEEP = "create_frontend_app.cleanup.asyncio.sleep"


class TestCleanupFailedProject:
    @pytest.mark.unit
    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", [None, ""])
    async def test_nothing_to_clean(self, path):
        with patch(REMOVE, new=AsyncMock()) as remove:
            assert await cleanup_failed_project(path) is True
        remove.assert_not_called()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_removes_real_directory(self, tmp_path: Path):
        target = tmp_path / "demo"
        (target / "src").mkdir(parents=True)
        (target / "package.json").write_text("{}")
        assert await cleanup_failed_project(target) is True
        assert not target.exists()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_first_attempt_succeeds(self):
        with (
            patch(REMOVE, new=AsyncMock(return_value=True)) as remove,
            patch(SLEEP, new=AsyncMock()) as sleep,
        ):
            assert await cleanup_failed_project("/tmp/demo") is True
        remove.assert_awaited_once_with("/tmp/demo")
        sleep.assert_not_called()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_succeeds_on_retry(self):
        with (
            patch(REMOVE, new=AsyncMock(side_effect=[False, True])) as remove,
            patch(SLEEP, new=AsyncMock()) as sleep,
        ):
            assert await cleanup_failed_project("/tmp/demo") is True
        assert remove.await_count == 2
        assert sleep.await_args_list == [call(1.0)]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_gives_up_after_three_attempts(self):
        with (
            patch(REMOVE, new=AsyncMock(return_value=False)) as remove,
            patch(SLEEP, new=AsyncMock()) as sleep,
        ):
            assert await cleanup_failed_project("/tmp/demo") is False
        assert remove.await_count == 3
        # Linear backoff between attempts, none after the last one.
        assert sleep.await_args_list == [call(1.0), call(2.0)]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_custom_attempts_and_backoff(self):
        with (
            patch(REMOVE, new=AsyncMock(return_value=False)) as remove,
            patch(SLEEP, new=AsyncMock()) as sleep,
        ):
            assert await cleanup_failed_project("/tmp/demo", attempts=4, backoff=0.5) is False
        assert remove.await_count == 4
        assert sleep.await_args_list == [call(0.5), call(1.0), call(1.5)]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_exceptions_never_escape(self):
        with (
            patch(REMOVE, new=AsyncMock(side_effect=RuntimeError("boom"))) as remove,
            patch(SLEEP, new=AsyncMock()),
        ):
            assert await cleanup_failed_project("/tmp/demo") is False
        assert remove.await_count == 3

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_manual_delete_hint(self, capsys):
        with (
            patch(REMOVE, new=AsyncMock(return_value=False)),
            patch(SLEEP, new=AsyncMock()),
        ):
            await cleanup_failed_project("/tmp/demo")
        out = capsys.readouterr().out
        assert "after 3 attempts" in out
        assert "manually delete" in out
