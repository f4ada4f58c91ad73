#!/usr/bin/env python3
"""CLI Smoke Tests - "Does it still work?" tests

These tests detect when the app is fundamentally broken:
- Import errors
- Config file handling
- Basic CLI functionality

NOT testing edge cases or complex logic - just "can the app start?"
"""

import json

import pytest
from click.testing import CliRunner

from oa_formatter.core.config import reset_config


@pytest.fixture(autouse=True)
def no_user_config(tmp_path, monkeypatch):
    monkeypatch.setenv("OA_FORMATTER_CONFIG", str(tmp_path / "none.toml"))
    monkeypatch.delenv("OA_FORMATTER_STOP_ON_ERROR", raising=False)
    reset_config()
    yield
    reset_config()


class TestCLIImports:
    """Test that core CLI components can be imported without crashing."""

    def test_app_hooks_import(self):
        from oa_formatter.app_hooks import on_format, on_list

        assert callable(on_format)
        assert callable(on_list)

    def test_package_lazy_exports(self):
        import oa_formatter

        assert oa_formatter.FilterRegistry.__name__ == "FilterRegistry"
        assert isinstance(oa_formatter.__version__, str)


class TestAppHooks:
    """Test hook business logic directly."""

    def test_on_format_default_pipeline(self):
        from oa_formatter.app_hooks import on_format

        result = on_format("ＡＢＣ")
        assert result["success"] is True
        assert result["text"] == "\nABC\n"
        assert result["pipelines"] == ["init"]
        assert result["input_chars"] == 3

    def test_on_format_unknown_pipeline(self):
        from oa_formatter.app_hooks import on_format

        result = on_format("abc", pipelines=["missing"])
        assert result["success"] is False
        assert result["type"] == "error"
        assert "missing" in result["message"]

    def test_on_format_step_failure(self):
        from oa_formatter.app_hooks import on_format
        from oa_formatter.filters import build_default_registry

        def boom(s):
            raise ValueError("bad step")

        registry = build_default_registry()
        registry.register("broken", [str.upper, boom])
        result = on_format("abc", pipelines=["broken"], registry=registry)
        assert result["success"] is False
        assert result["pipeline"] == "broken"
        assert result["stage"] == "step"
        assert result["step_index"] == 1

    def test_on_format_continue_on_error(self):
        from oa_formatter.app_hooks import on_format
        from oa_formatter.filters import build_default_registry

        registry = build_default_registry()
        registry.register("upper", str.upper)
        result = on_format("abc", pipelines=["missing", "upper"], continue_on_error=True, registry=registry)
        assert result["success"] is True
        assert result["text"] == "ABC"

    def test_on_list(self):
        from oa_formatter.app_hooks import on_list

        result = on_list()
        assert result["pipelines"] == [{"name": "init", "steps": 8, "enabled_steps": 8, "stop_on_error": True}]


class TestCLI:
    """Test the click command end to end."""

    def test_help(self):
        from oa_formatter.main import main

        result = CliRunner().invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "oa-format" in result.output

    def test_format_stdin(self):
        from oa_formatter.main import main

        result = CliRunner().invoke(main, [], input="  hello  \r\nworld")
        assert result.exit_code == 0
        assert result.output == "\nhello\n\nworld\n"

    def test_format_json(self):
        from oa_formatter.main import main

        result = CliRunner().invoke(main, ["-p", "init", "--json"], input="a")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["text"] == "\na\n"
        assert data["pipelines"] == ["init"]

    def test_format_file(self, tmp_path):
        from oa_formatter.main import main

        path = tmp_path / "notice.txt"
        path.write_text("１２３", encoding="utf-8")
        result = CliRunner().invoke(main, [str(path)])
        assert result.exit_code == 0
        assert result.output == "\n123\n"

    def test_unknown_pipeline_exits_nonzero(self):
        from oa_formatter.main import main

        result = CliRunner().invoke(main, ["-p", "nope", "--json"], input="a")
        assert result.exit_code == 1
        assert json.loads(result.output)["success"] is False

    def test_list(self):
        from oa_formatter.main import main

        result = CliRunner().invoke(main, ["--list"])
        assert result.exit_code == 0
        assert result.output.strip() == "init\t8/8 steps"
