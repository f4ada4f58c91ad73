"""Run several registered pipelines back to back."""

from collections.abc import Sequence
from typing import Any

from ..core.config import setup_logging
from .executor import coerce_text
from .registry import FilterRegistry

logger = setup_logging(__name__)


async def run_chains(
    registry: FilterRegistry,
    names: Sequence[str],
    text: Any,
    invoke_args: Sequence[Any] | None = None,
    stop_on_error: bool = True,
) -> str:
    """Apply each pipeline in ``names`` in order, feeding outputs forward.

    A failing pipeline (including an unregistered name) is logged. With
    ``stop_on_error`` the error propagates; otherwise the chain goes on
    with the text as it was before that pipeline.
    """
    current = coerce_text(text)
    for name in names:
        try:
            current = await registry.apply(name, current, invoke_args)
        except Exception as e:
            logger.error(f"Pipeline '{name}' failed in chain {list(names)}: {e}")
            if stop_on_error:
                raise
    return current
