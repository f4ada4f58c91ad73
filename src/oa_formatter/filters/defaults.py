"""Default registry used by the CLI: config defaults, logging hooks, init pipeline."""

from ..core.config import setup_logging
from ..pipeline import FilterRegistry, Hooks
from .init import install_init_filters

logger = setup_logging(__name__)


def _log_before(name: str, text: str) -> None:
    logger.debug(f"[{name}] input: {len(text)} chars")


def _log_after(name: str, text: str) -> None:
    logger.debug(f"[{name}] output: {len(text)} chars")


def _log_error(name: str, error: Exception, stage: str, step_index: int | None = None) -> None:
    where = f"step {step_index}" if step_index is not None else stage
    logger.error(f"[{name}] {where} failed: {error!r}")


LOGGING_HOOKS = Hooks(before_apply=_log_before, after_apply=_log_after, on_error=_log_error)


def build_default_registry() -> FilterRegistry:
    """Registry with config defaults, logging hooks and the ``init`` pipeline."""
    return FilterRegistry.from_config(hooks=LOGGING_HOOKS).use(install_init_filters)
