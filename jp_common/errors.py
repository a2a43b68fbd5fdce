"""Error taxonomy shared by the selection widgets and their loaders."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

_SCALARS = (str, int, float, bool)


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, _SCALARS):
        return value
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Copy ``context`` so json.dumps accepts it; paths and other objects become strings."""
    return {str(key): _jsonable(val) for key, val in context.items()}


class JPError(Exception):
    """Base class for library failures that carry a JSON-friendly context."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": str(self), "context": self.context}


class OptionLoadError(JPError):
    """The option list for a select could not be fetched or decoded."""

    @property
    def status(self) -> int | None:
        """HTTP status of the failed request, if any."""
        status = self.context.get("status")
        return status if isinstance(status, int) else None


class ResponseShapeError(JPError):
    """An API payload had none of the expected list shapes."""


class ConfigurationError(JPError):
    """Invalid widget or CLI configuration."""


E = TypeVar("E", bound=JPError)


def wrap_error(
    error_cls: type[E],
    message: str,
    *,
    context: Mapping[str, Any] | None = None,
    cause: Exception | None = None,
) -> E:
    """Build ``error_cls`` with context and cause in one call."""
    return error_cls(message, context=context, cause=cause)
