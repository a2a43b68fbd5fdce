"""Searchable single/multiple select backed by a static list or an async loader."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable, Mapping, Sequence

from jp_select.base import SelectBase
from jp_select.config import SelectConfig
from jp_select.models import DropdownState, LoadStatus, Option, SelectionState, SelectMode, SelectViewModel
from jp_select.normalize import coerce_option
from jp_select.protocols import SelectContainer, SelectionListener
from jp_select.sources import OptionSource, resolve_source
from jp_select.viewmodel import (
    SelectSnapshot,
    clamp_highlight,
    dropdown_state,
    render_select,
    visible_options,
)

logger = logging.getLogger(__name__)


class SearchableSelect(SelectBase):
    """Pick one or many options from a list filtered by substring search.

    The option list comes from ``source``: a sequence of Options (or
    Option-shaped mappings), or a loader returning one. A loader runs once, on
    the first :meth:`open`; if it raises or returns something that is not a
    list the widget becomes unavailable, shows the failure message instead of
    options, and ignores selection changes until :meth:`refresh` succeeds.

    ``on_selection_change`` (and any :meth:`subscribe` listener) receives the
    selected options after each user-driven change. :meth:`set_selected` is a
    programmatic write and only notifies when asked to, so a caller syncing its
    own state into the widget does not get that state echoed back.
    """

    def __init__(
        self,
        source: Any,
        *,
        container: SelectContainer | None = None,
        mode: SelectMode | str = SelectMode.SINGLE,
        placeholder: str | None = None,
        on_selection_change: SelectionListener | None = None,
        display_limit: int | None = None,
        config: SelectConfig | None = None,
    ) -> None:
        config = (config or SelectConfig()).with_overrides(display_limit=display_limit)
        super().__init__(mode=mode, config=config, placeholder=placeholder, container=container)

        self._source: OptionSource = resolve_source(source)
        self._options: list[Option] = self._source.options()
        self._status = LoadStatus.PENDING if self._source.is_async else LoadStatus.READY
        self._error: str | None = None
        self._load_task: asyncio.Task[None] | None = None

        if on_selection_change is not None:
            self.subscribe(on_selection_change)
        self._mount()

    # -- reads -------------------------------------------------------------

    @property
    def options(self) -> tuple[Option, ...]:
        return tuple(self._options)

    @property
    def status(self) -> LoadStatus:
        return self._status

    @property
    def state(self) -> DropdownState:
        return dropdown_state(self._state.open, self._status)

    @property
    def available(self) -> bool:
        return self._status is not LoadStatus.FAILED

    @property
    def error(self) -> str | None:
        """Reason of the last failed load, if the widget is unavailable."""
        return self._error

    @property
    def query(self) -> str:
        return self._state.query

    @property
    def highlight(self) -> int:
        return self._highlight

    def get_selected(self) -> list[Option]:
        return list(self._state.selected)

    def get_value(self) -> str | list[str]:
        """Selected id (``""`` when empty) in single mode, list of ids in multiple mode."""
        ids = self._state.selected_ids()
        if self._state.mode is SelectMode.MULTIPLE:
            return ids
        return ids[0] if ids else ""

    def visible(self) -> list[Option]:
        return visible_options(self._snapshot()).visible

    def view(self) -> SelectViewModel:
        return render_select(self._snapshot())

    def _snapshot(self) -> SelectSnapshot:
        state = SelectionState(
            mode=self._state.mode,
            selected=list(self._state.selected),
            query=self._state.query,
            open=self._state.open,
        )
        return SelectSnapshot(
            state=state,
            status=self._status,
            options=tuple(self._options),
            config=self._config,
            placeholder=self._placeholder,
            highlight=self._highlight,
        )

    def _payload(self) -> list[Option]:
        return list(self._state.selected)

    # -- dropdown lifecycle ------------------------------------------------

    def open(self) -> asyncio.Task[None] | None:
        """Open the dropdown, starting the first load when a loader is pending.

        Inside a running event loop the load is scheduled and its task
        returned; otherwise it runs to completion before this returns.
        """
        if not self._alive:
            return None
        if not self._state.open:
            self._state.open = True
            self._render()
        if self._status is LoadStatus.PENDING:
            return self._start_load()
        if self._status is LoadStatus.LOADING:
            return self._load_task
        return None

    def toggle(self) -> asyncio.Task[None] | None:
        if self._state.open:
            self.close()
            return None
        return self.open()

    def refresh(self) -> asyncio.Task[None] | None:
        """Reload options; the way out of the unavailable state."""
        if not self._alive:
            return None
        if self._status is LoadStatus.LOADING:
            return self._load_task
        if not self._source.is_async:
            self._options = self._source.options()
            self._status = LoadStatus.READY
            self._render()
            return None
        return self._start_load()

    async def wait_loaded(self) -> None:
        """Wait for an in-flight load scheduled by :meth:`open` or :meth:`refresh`."""
        task = self._load_task
        if task is not None:
            await task

    def _start_load(self) -> asyncio.Task[None] | None:
        self._status = LoadStatus.LOADING
        self._error = None
        self._render()
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(self._run_load())
            return None
        self._load_task = loop.create_task(self._run_load())
        return self._load_task

    async def _run_load(self) -> None:
        try:
            options = await self._source.load()
        except asyncio.CancelledError:
            self._status = LoadStatus.PENDING
            raise
        except Exception as exc:
            if not self._alive:
                logger.debug("Ignoring load failure for destroyed select: %s", exc)
                return
            logger.warning("Option load failed: %s", exc)
            self._options = []
            self._status = LoadStatus.FAILED
            self._error = str(exc) or type(exc).__name__
        else:
            if not self._alive:
                logger.debug("Ignoring options loaded after destroy")
                return
            self._options = options
            self._status = LoadStatus.READY
            self._error = None
            logger.debug("Loaded %d options", len(options))
        finally:
            self._load_task = None
        self._highlight = 0
        self._render()

    # -- search and keyboard -----------------------------------------------

    def set_query(self, text: str) -> None:
        if not self._alive:
            return
        self._state.query = text
        self._highlight = 0
        self._render()

    def clear_query(self) -> None:
        self.set_query("")

    def move_highlight(self, delta: int) -> None:
        if not self._alive:
            return
        self._highlight = clamp_highlight(self._highlight + delta, len(self.visible()))
        self._render()

    def select_highlighted(self) -> None:
        rows = self.visible()
        if not rows:
            return
        self.select_option(rows[clamp_highlight(self._highlight, len(rows))])

    # -- selection ---------------------------------------------------------

    def _selectable(self) -> bool:
        return self._alive and self._status is not LoadStatus.FAILED

    def _find(self, option_id: str) -> Option | None:
        for option in self._options:
            if option.id == option_id:
                return option
        return None

    def select_option(self, option: Option | str) -> None:
        """Select an option from the current option set (by Option or id).

        Listeners are called for every valid selection, including a repeat of
        an option that is already selected.
        """
        if not self._selectable():
            return
        option_id = option.id if isinstance(option, Option) else str(option)
        resolved = self._find(option_id)
        if resolved is None:
            logger.debug("Ignoring selection of unknown option %s", option_id)
            return

        if self._state.mode is SelectMode.SINGLE:
            self._state.selected = [resolved]
            self._state.open = False
        elif not self._state.has(resolved.id):
            self._state.selected.append(resolved)
        self._render()
        self._notify()

    def remove_selected(self, option: Option | str) -> None:
        if not self._selectable():
            return
        option_id = option.id if isinstance(option, Option) else str(option)
        if not self._state.has(option_id):
            return
        self._state.selected = [o for o in self._state.selected if o.id != option_id]
        self._render()
        self._notify()

    def set_selected(self, value: Any, *, notify: bool = False) -> None:
        """Replace the selection wholesale.

        ``value`` may be None, an id, an Option, an Option-shaped mapping, or a
        sequence of those. Ids must exist in the option set; Options and
        mappings are taken as given so an edit form can prefill before the
        loader has run. Single mode keeps the first entry.
        """
        if not self._selectable():
            return
        resolved = self._resolve_many(value)
        if self._state.mode is SelectMode.SINGLE:
            resolved = resolved[:1]
        self._state.selected = resolved
        self._render()
        if notify:
            self._notify()

    def _resolve_many(self, value: Any) -> list[Option]:
        if value is None:
            return []
        items: Iterable[Any]
        if isinstance(value, (str, Option, Mapping)):
            items = [value]
        elif isinstance(value, Sequence):
            items = value
        else:
            logger.debug("Ignoring selection value of type %s", type(value).__name__)
            return []

        resolved: list[Option] = []
        seen: set[str] = set()
        for item in items:
            option = self._resolve_one(item)
            if option is None or option.id in seen:
                continue
            seen.add(option.id)
            resolved.append(option)
        return resolved

    def _resolve_one(self, item: Any) -> Option | None:
        if isinstance(item, str):
            return self._find(item)
        option = coerce_option(item)
        if option is None:
            return None
        return self._find(option.id) or option
