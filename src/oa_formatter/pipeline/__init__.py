#!/usr/bin/env python3
"""Named filter pipelines.

Core components:
- Step / normalize_steps: canonical step records
- PipelineStore: name -> steps and options
- PipelineExecutor: sequential sync/async execution with hooks
- FilterRegistry: public registration and execution surface
- run_chains: run several pipelines back to back
"""

from .errors import (
    EmptyPipelineError,
    FilterRegistryError,
    IndexOutOfRangeError,
    InvalidNameError,
    InvalidStepError,
    PipelineNotFoundError,
    StepExecutionError,
)
from .executor import PipelineExecutor
from .hooks import Hooks, HookStage
from .registry import ADHOC_NAME, FilterRegistry
from .steps import Step, normalize_step, normalize_steps
from .store import PipelineEntry, PipelineOptions, PipelineStore
from .chains import run_chains

__all__ = [
    "ADHOC_NAME",
    "EmptyPipelineError",
    "FilterRegistry",
    "FilterRegistryError",
    "HookStage",
    "Hooks",
    "IndexOutOfRangeError",
    "InvalidNameError",
    "InvalidStepError",
    "PipelineEntry",
    "PipelineExecutor",
    "PipelineNotFoundError",
    "PipelineOptions",
    "PipelineStore",
    "Step",
    "StepExecutionError",
    "normalize_step",
    "normalize_steps",
    "run_chains",
]
