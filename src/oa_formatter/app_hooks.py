"""Hook implementations for the oa-format CLI.

Each ``on_<command>`` function holds the business logic for one CLI action
and returns a JSON-ready dictionary; main.py only parses options and prints.
"""

import asyncio
from typing import Any, Dict, List, Optional

from .core.config import get_config, setup_logging
from .filters import build_default_registry
from .pipeline import FilterRegistry, FilterRegistryError, StepExecutionError, run_chains
from .schemas import ErrorMessage, FormatResult, PipelineInfo, PipelineList

logger = setup_logging(__name__)


def on_format(
    text: str,
    pipelines: Optional[List[str]] = None,
    continue_on_error: bool = False,
    registry: Optional[FilterRegistry] = None,
    **kwargs,
) -> Dict[str, Any]:
    """Handle the format command.

    Args:
        text: Input text
        pipelines: Pipeline names to run in order (defaults to cli.default_pipelines)
        continue_on_error: Keep going past a failing pipeline
        registry: Registry to use (defaults to build_default_registry())

    Returns:
        FormatResult or ErrorMessage as a dictionary

    """
    registry = registry or build_default_registry()
    names = list(pipelines) if pipelines else get_config().default_pipelines

    try:
        output = asyncio.run(run_chains(registry, names, text, stop_on_error=not continue_on_error))
    except StepExecutionError as e:
        return ErrorMessage(message=str(e), pipeline=e.pipeline, stage=e.stage, step_index=e.step_index).model_dump()
    except FilterRegistryError as e:
        return ErrorMessage(message=str(e)).model_dump()

    logger.info(f"Formatted {len(text)} -> {len(output)} chars with {names}")
    return FormatResult(text=output, pipelines=names, input_chars=len(text), output_chars=len(output)).model_dump()


def on_list(registry: Optional[FilterRegistry] = None, **kwargs) -> Dict[str, Any]:
    """Handle the list command: registered pipelines with step counts."""
    registry = registry or build_default_registry()
    infos = []
    for name in registry.names():
        steps = registry.get(name) or []
        infos.append(
            PipelineInfo(
                name=name,
                steps=len(steps),
                enabled_steps=sum(1 for step in steps if step.enabled),
                stop_on_error=registry.options(name).stop_on_error,
            )
        )
    return PipelineList(pipelines=infos).model_dump()
