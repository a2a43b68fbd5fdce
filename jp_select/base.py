"""Shared state and lifecycle for select widgets: mount, listeners, destroy."""

from __future__ import annotations

import logging
from typing import Any, Callable

from jp_select.config import SelectConfig
from jp_select.models import SelectionState, SelectMode, SelectViewModel
from jp_select.protocols import SelectContainer

logger = logging.getLogger(__name__)


class SelectBase:
    """Instance-scoped state shared by the select widgets.

    Owns the selection state, the listener list, the mount point and the
    liveness flag. Subclasses provide :meth:`view` and :meth:`_payload`.
    """

    def __init__(
        self,
        *,
        mode: SelectMode | str,
        config: SelectConfig,
        placeholder: str | None = None,
        container: SelectContainer | None = None,
    ) -> None:
        self._config = config
        self._placeholder = placeholder
        self._state = SelectionState(mode=SelectMode(mode))
        self._listeners: list[Callable[[Any], None]] = []
        self._container = container
        self._alive = True
        self._highlight = 0

    def _mount(self) -> None:
        if self._container is not None:
            self._container.clear()
        self._render()

    def mount(self, container: SelectContainer) -> None:
        """Attach to a (new) mount point, clearing it and rendering."""
        if not self._alive:
            return
        if self._container is not None and self._container is not container:
            self._container.clear()
        self._container = container
        self._mount()

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def mode(self) -> SelectMode:
        return self._state.mode

    @property
    def config(self) -> SelectConfig:
        return self._config

    @property
    def is_open(self) -> bool:
        return self._state.open

    def subscribe(self, listener: Callable[[Any], None]) -> Callable[[], None]:
        """Register a selection listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def close(self) -> None:
        """Close the dropdown (outside click, escape)."""
        if not self._alive or not self._state.open:
            return
        self._state.open = False
        self._render()

    def destroy(self) -> None:
        """Detach listeners and unmount. Later calls on the widget are inert."""
        if not self._alive:
            return
        self._alive = False
        self._listeners.clear()
        if self._container is not None:
            self._container.clear()
            self._container = None
        logger.debug("Destroyed %s", type(self).__name__)

    def view(self) -> SelectViewModel:
        raise NotImplementedError

    def _payload(self) -> Any:
        raise NotImplementedError

    def _render(self) -> None:
        if self._alive and self._container is not None:
            self._container.render(self.view())

    def _notify(self) -> None:
        payload = self._payload()
        for listener in list(self._listeners):
            listener(payload)
