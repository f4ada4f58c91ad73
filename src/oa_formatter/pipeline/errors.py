"""Exception hierarchy for the filter registry.

Validation errors are raised directly by the registering or mutating call.
StepExecutionError is raised by a run that aborts; it is chained from the
error the step or hook raised, so ``__cause__`` always holds the original.
"""


class FilterRegistryError(Exception):
    """Base exception for filter registry errors."""


class InvalidNameError(FilterRegistryError):
    """Raised when a pipeline name is not a non-empty string."""

    def __init__(self, name: object):
        self.name = name
        super().__init__(f"Pipeline name must be a non-empty string, got {name!r}")


class InvalidStepError(FilterRegistryError):
    """Raised when a step-like value has no callable ``fn``."""


class EmptyPipelineError(FilterRegistryError):
    """Raised when normalization yields no steps."""

    def __init__(self) -> None:
        super().__init__("Pipeline has no steps")


class PipelineNotFoundError(FilterRegistryError):
    """Raised when a pipeline name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Pipeline not registered: {name}")


class IndexOutOfRangeError(FilterRegistryError):
    """Raised when a step index is outside the pipeline."""

    def __init__(self, name: str, index: int, length: int):
        self.name = name
        self.index = index
        self.length = length
        super().__init__(f"Step index {index} out of range for pipeline {name!r} ({length} steps)")


class StepExecutionError(FilterRegistryError):
    """Raised when a step or hook fails in a pipeline that stops on error."""

    def __init__(self, pipeline: str, stage: str, cause: BaseException, step_index: int | None = None):
        self.pipeline = pipeline
        self.stage = stage
        self.step_index = step_index
        self.cause = cause
        where = f"step {step_index}" if step_index is not None else stage
        super().__init__(f"Pipeline {pipeline!r} failed at {where}: {cause}")
