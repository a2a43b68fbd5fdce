"""Option sources: a static list or an async loader called on first open."""

from __future__ import annotations

import inspect
from typing import Any, Sequence

from jp_common.errors import ConfigurationError, OptionLoadError
from jp_select.models import Option
from jp_select.normalize import Err, coerce_options
from jp_select.protocols import OptionLoader


class StaticSource:
    is_async = False

    def __init__(self, values: Sequence[Any]) -> None:
        result = coerce_options(values)
        if isinstance(result, Err):
            raise ConfigurationError(
                "Static option source must be a list", context={"reason": result.reason}
            )
        self._options = result.value

    async def load(self) -> list[Option]:
        return list(self._options)

    def options(self) -> list[Option]:
        return list(self._options)


class LoaderSource:
    is_async = True

    def __init__(self, loader: OptionLoader) -> None:
        self._loader = loader

    async def load(self) -> list[Option]:
        """Call the loader and coerce its result, raising OptionLoadError on bad data."""
        value = self._loader()
        if inspect.isawaitable(value):
            value = await value
        result = coerce_options(value)
        if isinstance(result, Err):
            raise OptionLoadError("Option loader returned malformed data", context={"reason": result.reason})
        return result.value

    def options(self) -> list[Option]:
        return []


OptionSource = StaticSource | LoaderSource


def resolve_source(source: Any) -> OptionSource:
    if isinstance(source, (StaticSource, LoaderSource)):
        return source
    if callable(source):
        return LoaderSource(source)
    if source is None:
        return StaticSource([])
    return StaticSource(source)
