"""Step-contract filter sets shipped with the formatter."""

from .defaults import LOGGING_HOOKS, build_default_registry
from .init import INIT_FILTERS, install_init_filters

__all__ = ["INIT_FILTERS", "LOGGING_HOOKS", "build_default_registry", "install_init_filters"]
