"""Mount-point and callback types the select widgets depend on."""

from __future__ import annotations

from typing import Awaitable, Callable, Protocol, Sequence, Union

from jp_select.models import Option, SelectViewModel


class SelectContainer(Protocol):
    """Mount point a widget renders into."""

    def render(self, view: SelectViewModel) -> None: ...

    def clear(self) -> None: ...


SelectionListener = Callable[[list[Option]], None]
OptionLoader = Callable[[], Union[Awaitable[Sequence[object]], Sequence[object]]]
