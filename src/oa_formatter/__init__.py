"""OA formatter - named text-filter pipelines for patent office correspondence."""

from importlib import metadata
from importlib import import_module
from pathlib import Path
import tomllib
from typing import TYPE_CHECKING


def _get_version() -> str:
    try:
        return metadata.version("goobits-oa-formatter")
    except metadata.PackageNotFoundError:
        pass

    try:
        pyproject_path = Path(__file__).resolve().parents[2] / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
        return str(data["project"]["version"])
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        return "unknown"


__version__ = _get_version()

if TYPE_CHECKING:
    from .core.config import ConfigLoader, get_config
    from .filters import build_default_registry, install_init_filters
    from .pipeline import FilterRegistry, Hooks, PipelineOptions, Step, run_chains

_LAZY_EXPORTS = {
    "FilterRegistry": (".pipeline", "FilterRegistry"),
    "Hooks": (".pipeline", "Hooks"),
    "PipelineOptions": (".pipeline", "PipelineOptions"),
    "Step": (".pipeline", "Step"),
    "run_chains": (".pipeline", "run_chains"),
    "build_default_registry": (".filters", "build_default_registry"),
    "install_init_filters": (".filters", "install_init_filters"),
    "ConfigLoader": (".core.config", "ConfigLoader"),
    "get_config": (".core.config", "get_config"),
}


def __getattr__(name):
    if name in {"core", "pipeline", "filters"}:
        module = import_module(f".{name}", __name__)
        globals()[name] = module
        return module

    if name not in _LAZY_EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attr_name = _LAZY_EXPORTS[name]
    module = import_module(module_name, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


__all__ = [
    "FilterRegistry",
    "Hooks",
    "PipelineOptions",
    "Step",
    "run_chains",
    "build_default_registry",
    "install_init_filters",
    "ConfigLoader",
    "get_config",
]
