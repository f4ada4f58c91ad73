"""Named pipeline storage.

PipelineStore maps pipeline names to their steps and resolved options.
It never executes anything; PipelineExecutor reads entries from it.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from ..core.config import as_bool, get_config
from .errors import IndexOutOfRangeError, InvalidNameError, PipelineNotFoundError
from .steps import Step, normalize_step, normalize_steps

# camelCase spellings accepted for compatibility with hand-written option dicts
_OPTION_ALIASES = {"stopOnError": "stop_on_error"}


@dataclass(frozen=True)
class PipelineOptions:
    """Execution options for one pipeline."""

    stop_on_error: bool = True
    # Reserved. Steps always run one after another, whatever this is set to.
    parallel: bool = False

    @classmethod
    def from_config(cls) -> "PipelineOptions":
        """Load registry-wide defaults from the formatter config."""
        config = get_config()
        return cls(stop_on_error=config.stop_on_error, parallel=config.parallel)

    def merged(self, overrides: "PipelineOptions | Mapping[str, Any] | None") -> "PipelineOptions":
        """Return these options with ``overrides`` applied on top."""
        if overrides is None:
            return self
        if isinstance(overrides, PipelineOptions):
            return overrides
        if not isinstance(overrides, Mapping):
            raise TypeError(f"Pipeline options must be a mapping, got {type(overrides).__name__}")

        changes: dict[str, bool] = {}
        for key, value in overrides.items():
            key = _OPTION_ALIASES.get(key, key)
            if key in ("stop_on_error", "parallel"):
                changes[key] = as_bool(value)
        return replace(self, **changes)


@dataclass
class PipelineEntry:
    steps: list[Step]
    options: PipelineOptions = field(default_factory=PipelineOptions)


class PipelineStore:
    """Ordered map of pipeline name to entry."""

    def __init__(self, defaults: PipelineOptions | None = None):
        self.defaults = defaults or PipelineOptions()
        self._entries: dict[str, PipelineEntry] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def register(self, name: str, steps_like: Any, options: PipelineOptions | Mapping[str, Any] | None = None) -> None:
        if not isinstance(name, str) or not name.strip():
            raise InvalidNameError(name)
        steps = normalize_steps(steps_like)
        self._entries[name] = PipelineEntry(steps=steps, options=self.defaults.merged(options))

    def unregister(self, name: str) -> None:
        self._entries.pop(name, None)

    def get(self, name: str) -> list[Step] | None:
        entry = self._entries.get(name)
        if entry is None:
            return None
        return list(entry.steps)

    def names(self) -> list[str]:
        return list(self._entries)

    def entry(self, name: str) -> PipelineEntry:
        try:
            return self._entries[name]
        except KeyError:
            raise PipelineNotFoundError(name) from None

    def insert(self, name: str, index: int, step_like: Any) -> None:
        steps = self.entry(name).steps
        step = normalize_step(step_like)
        steps.insert(max(0, min(index, len(steps))), step)

    def remove_at(self, name: str, index: int) -> None:
        steps = self.entry(name).steps
        self._check_index(name, index, steps)
        del steps[index]

    def enable(self, name: str, index: int, enabled: bool) -> None:
        steps = self.entry(name).steps
        self._check_index(name, index, steps)
        steps[index] = replace(steps[index], enabled=bool(enabled))

    @staticmethod
    def _check_index(name: str, index: int, steps: list[Step]) -> None:
        if index < 0 or index >= len(steps):
            raise IndexOutOfRangeError(name, index, len(steps))
