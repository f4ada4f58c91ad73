"""Tests for the default registry builder."""

import pytest

from oa_formatter.core.config import reset_config
from oa_formatter.filters import LOGGING_HOOKS, build_default_registry


@pytest.fixture(autouse=True)
def no_user_config(tmp_path, monkeypatch):
    monkeypatch.setenv("OA_FORMATTER_CONFIG", str(tmp_path / "none.toml"))
    monkeypatch.delenv("OA_FORMATTER_STOP_ON_ERROR", raising=False)
    reset_config()
    yield
    reset_config()


def test_default_registry_has_init_pipeline():
    registry = build_default_registry()
    assert registry.names() == ["init"]
    assert registry.hooks is LOGGING_HOOKS
    assert registry.options("init").stop_on_error is True


@pytest.mark.asyncio
async def test_logging_hooks_do_not_change_output():
    registry = build_default_registry()
    assert await registry.apply("init", "ａ  b\r\nc") == "\na b\n\nc\n"


@pytest.mark.asyncio
async def test_logging_on_error_hook_tolerates_failures():
    registry = build_default_registry()

    def boom(s):
        raise ValueError("bad")

    registry.register("lenient", [boom, str.upper], {"stop_on_error": False})
    assert await registry.apply("lenient", "abc") == "ABC"
