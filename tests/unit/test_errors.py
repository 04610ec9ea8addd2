"""Unit tests for safe_execute_async."""

import pytest

from src.utils.errors import safe_execute_async


async def _ok():
    return "value"


async def _boom():
    raise OSError("disk gone")


@pytest.mark.asyncio
async def test_returns_result():
    assert await safe_execute_async(_ok(), "read") == "value"


@pytest.mark.asyncio
async def test_returns_default_on_error():
    assert await safe_execute_async(_boom(), "read", default_return=False) is False


@pytest.mark.asyncio
async def test_failure_logged_as_warning(caplog):
    caplog.set_level("WARNING", logger="recipe_converter")
    await safe_execute_async(_boom(), "Clipboard write")
    assert any(r.levelname == "WARNING" and "Clipboard write: disk gone" in r.getMessage() for r in caplog.records)
