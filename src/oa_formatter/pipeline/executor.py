#!/usr/bin/env python3
"""Pipeline execution.

PipelineExecutor runs one pipeline entry over a string:

1. Coerce the input to str
2. Call the before_apply hook
3. Run each enabled step, feeding its output to the next step
4. Call the after_apply hook
5. Return the final string

Steps and hooks may return plain values or awaitables; both are resolved
through ``resolve`` so callers cannot tell them apart. Failures are
reported to on_error and then either abort the run (stop_on_error) or are
skipped, leaving the current string as it was before the failing step.

The step list is copied when a run starts. Steps inserted, removed or
toggled while a run is suspended take effect on the next run only.
"""

import inspect
from collections.abc import Sequence
from typing import Any

from ..core.config import setup_logging
from .errors import StepExecutionError
from .hooks import Hooks, HookStage
from .store import PipelineEntry

logger = setup_logging(__name__)


async def resolve(value: Any) -> Any:
    """Await ``value`` if it is awaitable, otherwise return it as is."""
    if inspect.isawaitable(value):
        return await value
    return value


def coerce_text(value: Any) -> str:
    """None becomes the empty string; anything else goes through str()."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class PipelineExecutor:
    """Runs pipeline entries with the registry's hooks."""

    def __init__(self, hooks: Hooks | None = None):
        self.hooks = hooks or Hooks()

    async def run(
        self,
        name: str,
        entry: PipelineEntry,
        text: Any,
        invoke_args: Sequence[Any] | None = None,
    ) -> str:
        """Run ``entry`` over ``text`` and return the result.

        Args:
            name: Pipeline name passed to hooks (``"<adhoc>"`` for unregistered lists)
            entry: Steps and options to run
            text: Input value; None becomes ""
            invoke_args: Extra arguments appended after each step's own args

        Raises:
            StepExecutionError: If a step or hook fails and the pipeline stops on error

        """
        current = coerce_text(text)
        steps = list(entry.steps)
        stop_on_error = entry.options.stop_on_error
        shared_args = tuple(invoke_args or ())

        logger.debug(f"Running pipeline '{name}' ({len(steps)} steps, {len(current)} chars)")

        if self.hooks.before_apply is not None:
            await self._call_hook(name, self.hooks.before_apply, current, stop_on_error)

        for index, step in enumerate(steps):
            if not step.enabled:
                logger.debug(f"Pipeline '{name}': step {index} ({step.label}) disabled, skipping")
                continue

            try:
                result = await resolve(step.fn(current, *step.args, *shared_args))
            except Exception as e:
                await self._report_error(name, e, HookStage.STEP, index)
                if stop_on_error:
                    raise StepExecutionError(name, HookStage.STEP.value, e, step_index=index) from e
                logger.warning(f"Pipeline '{name}': step {index} ({step.label}) failed, continuing: {e}")
                continue

            current = coerce_text(result)

        if self.hooks.after_apply is not None:
            await self._call_hook(name, self.hooks.after_apply, current, stop_on_error)

        return current

    async def _call_hook(self, name: str, hook: Any, text: str, stop_on_error: bool) -> None:
        try:
            await resolve(hook(name, text))
        except Exception as e:
            await self._report_error(name, e, HookStage.HOOK)
            if stop_on_error:
                raise StepExecutionError(name, HookStage.HOOK.value, e) from e
            logger.warning(f"Pipeline '{name}': hook {getattr(hook, '__name__', hook)!s} failed, continuing: {e}")

    async def _report_error(self, name: str, error: Exception, stage: HookStage, step_index: int | None = None) -> None:
        """Forward an error to on_error. A failing on_error is logged and ignored."""
        if self.hooks.on_error is None:
            return
        try:
            await resolve(self.hooks.on_error(name, error, stage.value, step_index))
        except Exception:
            logger.exception(f"on_error hook raised while handling an error in pipeline '{name}'")
