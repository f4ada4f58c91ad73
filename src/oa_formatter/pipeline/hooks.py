"""Lifecycle hooks invoked around pipeline runs."""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

HookResult = Union[None, Awaitable[None]]


class HookStage(str, Enum):
    """Where an error reported to ``on_error`` happened."""

    HOOK = "hook"
    STEP = "step"


@dataclass(frozen=True)
class Hooks:
    """Registry-wide callbacks. Each may be sync or async.

    - before_apply(name, input)
    - after_apply(name, output)
    - on_error(name, error, stage, step_index=None)
    """

    before_apply: Optional[Callable[[str, str], HookResult]] = None
    after_apply: Optional[Callable[[str, str], HookResult]] = None
    on_error: Optional[Callable[..., HookResult]] = None

    @classmethod
    def from_mapping(cls, hooks: Mapping[str, Any]) -> "Hooks":
        """Build hooks from a dict; camelCase keys are accepted too."""

        def pick(snake: str, camel: str) -> Any:
            fn = hooks.get(snake)
            if fn is None:
                fn = hooks.get(camel)
            if fn is not None and not callable(fn):
                raise TypeError(f"Hook {snake!r} must be callable")
            return fn

        return cls(
            before_apply=pick("before_apply", "beforeApply"),
            after_apply=pick("after_apply", "afterApply"),
            on_error=pick("on_error", "onError"),
        )
