"""Step records and the normalizer that builds them.

A pipeline step is accepted in several shapes:

- a bare callable ``fn(current, *args)``
- a mapping with an ``fn`` key and optional ``name``, ``args``, ``enabled``
- any object exposing a callable ``fn`` attribute (including ``Step``)

All of them are normalized into one immutable ``Step`` before they reach
the store, so the executor only ever sees a single record type.
"""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from .errors import EmptyPipelineError, InvalidStepError

StepResult = Union[str, Awaitable[str], None]
StepFn = Callable[..., StepResult]

_MISSING = object()


@dataclass(frozen=True)
class Step:
    """One transformation in a pipeline."""

    fn: StepFn
    name: str | None = None
    args: tuple[Any, ...] = field(default_factory=tuple)
    enabled: bool = True

    @property
    def label(self) -> str:
        """Name used in log lines: the step name, else the function name."""
        if self.name:
            return self.name
        return getattr(self.fn, "__name__", repr(self.fn))


def _read(item: Any, key: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(key, _MISSING)
    return getattr(item, key, _MISSING)


def normalize_step(item: Any) -> Step:
    """Normalize one step-like value into a ``Step``.

    Raises:
        InvalidStepError: If the value is neither callable nor exposes a callable ``fn``.

    """
    if isinstance(item, Step):
        return Step(fn=item.fn, name=item.name, args=tuple(item.args), enabled=item.enabled)

    if callable(item) and not isinstance(item, Mapping):
        return Step(fn=item)

    fn = _read(item, "fn")
    if fn is _MISSING or not callable(fn):
        raise InvalidStepError(
            f"A step must be a callable or a record with a callable 'fn', got {type(item).__name__}"
        )

    name = _read(item, "name")
    args = _read(item, "args")
    if args is _MISSING or args is None:
        args = ()
    elif isinstance(args, (list, tuple)):
        args = tuple(args)
    else:
        raise InvalidStepError(f"Step 'args' must be a list or tuple, got {type(args).__name__}")

    return Step(
        fn=fn,
        name=name if isinstance(name, str) else None,
        args=args,
        enabled=_read(item, "enabled") is not False,
    )


def normalize_steps(steps_like: Any) -> list[Step]:
    """Normalize one step-like value or a list/tuple of them.

    Returns a new list; the input is never modified.

    Raises:
        InvalidStepError: If ``steps_like`` is None or any element is invalid.
        EmptyPipelineError: If there are no steps.

    """
    if steps_like is None:
        raise InvalidStepError("No steps given")

    items = steps_like if isinstance(steps_like, (list, tuple)) else [steps_like]
    steps = [normalize_step(item) for item in items]
    if not steps:
        raise EmptyPipelineError()
    return steps


__all__ = ["Step", "StepFn", "StepResult", "normalize_step", "normalize_steps"]
