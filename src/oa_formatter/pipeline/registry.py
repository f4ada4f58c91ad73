"""Filter registry: the public surface for registering and running pipelines.

Example:
    registry = FilterRegistry()
    registry.register("upper", [str.upper, lambda s: s + "!"])
    await registry.apply("upper", "abc")  # "ABC!"

    registry.register("prefix", [{"fn": lambda s, p: p + s, "args": ["[OA] "]}])
    await registry.apply("prefix", "text")  # "[OA] text"

Step arguments are always passed as ``fn(current, *step.args, *invoke_args)``.

Registries are plain objects; create one per use and pass it to whatever
needs it. Two registries never share pipelines, hooks or defaults.
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from .executor import PipelineExecutor
from .hooks import Hooks
from .steps import Step, normalize_steps
from .store import PipelineEntry, PipelineOptions, PipelineStore

ADHOC_NAME = "<adhoc>"


class FilterRegistry:
    """Named text-filter pipelines with shared hooks and defaults."""

    def __init__(
        self,
        hooks: Hooks | Mapping[str, Any] | None = None,
        defaults: PipelineOptions | Mapping[str, Any] | None = None,
    ):
        if hooks is None or isinstance(hooks, Hooks):
            self.hooks = hooks or Hooks()
        else:
            self.hooks = Hooks.from_mapping(hooks)
        self.defaults = PipelineOptions().merged(defaults)
        self._store = PipelineStore(self.defaults)
        self._executor = PipelineExecutor(self.hooks)

    @classmethod
    def from_config(cls, hooks: Hooks | Mapping[str, Any] | None = None) -> "FilterRegistry":
        """Create a registry whose defaults come from the formatter config."""
        return cls(hooks=hooks, defaults=PipelineOptions.from_config())

    def __contains__(self, name: object) -> bool:
        return name in self._store

    def __len__(self) -> int:
        return len(self._store)

    # Registration

    def register(self, name: str, steps_like: Any, options: PipelineOptions | Mapping[str, Any] | None = None) -> None:
        """Register ``steps_like`` under ``name``, replacing any existing pipeline."""
        self._store.register(name, steps_like, options)

    def unregister(self, name: str) -> None:
        self._store.unregister(name)

    def get(self, name: str) -> list[Step] | None:
        """Copy of the pipeline's steps, or None if it is not registered."""
        return self._store.get(name)

    def names(self) -> list[str]:
        return self._store.names()

    def options(self, name: str) -> PipelineOptions:
        return self._store.entry(name).options

    def insert(self, name: str, index: int, step_like: Any) -> None:
        """Insert one step; ``index`` is clamped into [0, len]."""
        self._store.insert(name, index, step_like)

    def remove_at(self, name: str, index: int) -> None:
        self._store.remove_at(name, index)

    def enable(self, name: str, index: int, enabled: bool) -> None:
        self._store.enable(name, index, enabled)

    # Execution

    async def apply(self, name: str, text: Any, invoke_args: Sequence[Any] | None = None) -> str:
        """Run the registered pipeline ``name`` over ``text``.

        Raises:
            PipelineNotFoundError: If ``name`` is not registered
            StepExecutionError: If a step or hook fails and the pipeline stops on error

        """
        entry = self._store.entry(name)
        return await self._executor.run(name, entry, text, invoke_args)

    async def apply_list(
        self,
        steps_like: Any,
        text: Any,
        invoke_args: Sequence[Any] | None = None,
        options: PipelineOptions | Mapping[str, Any] | None = None,
    ) -> str:
        """Run an unregistered list of steps over ``text``.

        Hooks see the pipeline name ``"<adhoc>"``. Ad-hoc runs stop on error
        unless ``options`` says otherwise.
        """
        steps = normalize_steps(steps_like)
        resolved = self.defaults.merged({"stop_on_error": True}).merged(options)
        return await self._executor.run(ADHOC_NAME, PipelineEntry(steps=steps, options=resolved), text, invoke_args)

    # Extension

    def use(self, plugin: Callable[["FilterRegistry"], Any]) -> "FilterRegistry":
        """Call ``plugin(self)`` so it can register or modify pipelines."""
        if not callable(plugin):
            raise TypeError(f"Plugin must be callable, got {type(plugin).__name__}")
        plugin(self)
        return self
