"""Non-searching single select over a fixed list (review policy, currency)."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Sequence

from jp_select.base import SelectBase
from jp_select.config import SelectConfig
from jp_select.models import LoadStatus, Option, SelectionState, SelectMode, SelectViewModel
from jp_select.normalize import field_mapper, records_to_options
from jp_select.protocols import SelectContainer
from jp_select.viewmodel import SelectSnapshot, render_select

logger = logging.getLogger(__name__)


class CustomSelect(SelectBase):
    def __init__(
        self,
        options: Sequence[Mapping[str, Any]] = (),
        *,
        container: SelectContainer | None = None,
        placeholder: str | None = None,
        on_select: Callable[[Option | None], None] | None = None,
        value_field: str = "value",
        label_field: str = "label",
        config: SelectConfig | None = None,
    ) -> None:
        super().__init__(
            mode=SelectMode.SINGLE,
            config=config or SelectConfig(),
            placeholder=placeholder,
            container=container,
        )
        self._mapper = field_mapper(value_field, label_field)
        self._options: list[Option] = records_to_options(options, self._mapper)
        if on_select is not None:
            self.subscribe(on_select)
        self._mount()

    @property
    def options(self) -> tuple[Option, ...]:
        return tuple(self._options)

    def open(self) -> None:
        if not self._alive or self._state.open:
            return
        self._state.open = True
        self._render()

    def toggle(self) -> None:
        if self._state.open:
            self.close()
        else:
            self.open()

    def get_selected(self) -> Option | None:
        return self._state.selected[0] if self._state.selected else None

    def get_value(self) -> str:
        selected = self.get_selected()
        return selected.id if selected else ""

    def _find(self, value: str) -> Option | None:
        for option in self._options:
            if option.id == value:
                return option
        return None

    def select(self, value: Option | str) -> None:
        """Select by value, close the dropdown and notify."""
        if not self._alive:
            return
        option = self._find(value.id if isinstance(value, Option) else str(value))
        if option is None:
            logger.debug("Ignoring unknown value %s", value)
            return
        self._state.selected = [option]
        self._state.open = False
        self._render()
        self._notify()

    def set_selected(self, value: str | None, *, notify: bool = False) -> None:
        """Programmatically select ``value``; unknown values are ignored, None clears."""
        if not self._alive:
            return
        if value is None:
            self._state.selected = []
        else:
            option = self._find(str(value))
            if option is None:
                logger.debug("Ignoring unknown value %s", value)
                return
            self._state.selected = [option]
        self._render()
        if notify:
            self._notify()

    def set_options(self, options: Sequence[Mapping[str, Any]]) -> None:
        """Replace the option list; the current selection is kept as is."""
        if not self._alive:
            return
        self._options = records_to_options(options, self._mapper)
        self._highlight = 0
        self._render()

    def move_highlight(self, delta: int) -> None:
        if not self._alive or not self._options:
            return
        self._highlight = max(0, min(self._highlight + delta, len(self._options) - 1))
        self._render()

    def select_highlighted(self) -> None:
        if self._options:
            self.select(self._options[self._highlight])

    def view(self) -> SelectViewModel:
        config = self._config.model_copy(update={"display_limit": max(len(self._options), 1)})
        state = SelectionState(
            mode=SelectMode.SINGLE,
            selected=list(self._state.selected),
            open=self._state.open,
        )
        return render_select(
            SelectSnapshot(
                state=state,
                status=LoadStatus.READY,
                options=tuple(self._options),
                config=config,
                placeholder=self._placeholder,
                highlight=self._highlight,
                searchable=False,
            )
        )

    def _payload(self) -> Option | None:
        return self.get_selected()
