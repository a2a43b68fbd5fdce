"""Public API surface for jp_common."""

from jp_common.errors import (
    ConfigurationError,
    JPError,
    OptionLoadError,
    ResponseShapeError,
)
from jp_common.logging import configure_logging

__all__ = [
    "configure_logging",
    "ConfigurationError",
    "JPError",
    "OptionLoadError",
    "ResponseShapeError",
]
