import pytest

from oa_formatter.core.config import DEFAULT_CONFIG, ConfigLoader, get_config, reset_config
from oa_formatter.pipeline import FilterRegistry, PipelineOptions


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        '[formatter.registry]\nstop_on_error = false\n\n[formatter.cli]\ndefault_pipelines = ["init", "main"]\n',
        encoding="utf-8",
    )
    return path


@pytest.fixture
def isolated_config(monkeypatch, config_file):
    monkeypatch.setenv("OA_FORMATTER_CONFIG", str(config_file))
    monkeypatch.delenv("OA_FORMATTER_STOP_ON_ERROR", raising=False)
    reset_config()
    yield
    reset_config()


def test_defaults_when_file_missing(tmp_path, monkeypatch):
    monkeypatch.delenv("OA_FORMATTER_STOP_ON_ERROR", raising=False)
    config = ConfigLoader(tmp_path / "missing.toml")
    assert config.stop_on_error is True
    assert config.parallel is False
    assert config.default_pipelines == ["init"]


def test_file_overrides_defaults(config_file, monkeypatch):
    monkeypatch.delenv("OA_FORMATTER_STOP_ON_ERROR", raising=False)
    config = ConfigLoader(config_file)
    assert config.stop_on_error is False
    assert config.parallel is False
    assert config.default_pipelines == ["init", "main"]


def test_env_overrides_file(config_file, monkeypatch):
    monkeypatch.setenv("OA_FORMATTER_STOP_ON_ERROR", "yes")
    config = ConfigLoader(config_file)
    assert config.stop_on_error is True
    # The env override must not leak into the shared defaults
    assert DEFAULT_CONFIG["registry"]["stop_on_error"] is True


def test_dot_notation_get(config_file):
    config = ConfigLoader(config_file)
    assert config.get("cli.default_pipelines") == ["init", "main"]
    assert config.get("registry.missing", "fallback") == "fallback"
    assert config.get("nope.deeper") is None


def test_single_default_pipeline_string(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[formatter.cli]\ndefault_pipelines = "init"\n', encoding="utf-8")
    assert ConfigLoader(path).default_pipelines == ["init"]


def test_string_flags_in_file_are_parsed(tmp_path, monkeypatch):
    monkeypatch.delenv("OA_FORMATTER_STOP_ON_ERROR", raising=False)
    path = tmp_path / "config.toml"
    path.write_text('[formatter.registry]\nstop_on_error = "false"\n', encoding="utf-8")
    assert ConfigLoader(path).stop_on_error is False


def test_get_config_is_cached(isolated_config):
    assert get_config() is get_config()


def test_registry_defaults_from_config(isolated_config):
    assert PipelineOptions.from_config() == PipelineOptions(stop_on_error=False)
    registry = FilterRegistry.from_config()
    registry.register("x", str.upper)
    assert registry.options("x").stop_on_error is False
