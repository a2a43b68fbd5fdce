"""Tag list companion for a SearchableSelect (editor / reviewer chips)."""

from __future__ import annotations

import json
from dataclasses import dataclass

from jp_select.models import Option, SelectMode
from jp_select.searchable import SearchableSelect


@dataclass(frozen=True)
class Tag:
    id: str
    label: str
    secondary_text: str | None = None


class SelectionTags:
    """Mirror a select's selection as removable tags.

    Removing a tag writes the remaining selection back with
    ``set_selected(..., notify=False)``; the tag list already holds the result,
    so the widget must not call back into it.
    """

    def __init__(self, select: SearchableSelect, *, empty_message: str = "Nothing selected") -> None:
        self._select = select
        self._empty_message = empty_message
        self._items: list[Option] = select.get_selected()
        self._unsubscribe = select.subscribe(self._on_change)

    def _on_change(self, selected: list[Option]) -> None:
        self._items = list(selected)

    @property
    def tags(self) -> list[Tag]:
        return [Tag(id=o.id, label=o.label, secondary_text=o.secondary_text) for o in self._items]

    @property
    def empty_message(self) -> str | None:
        return None if self._items else self._empty_message

    def ids(self) -> list[str]:
        return [option.id for option in self._items]

    def value_json(self) -> str:
        """Ids as the JSON array stored in the form's hidden field."""
        return json.dumps(self.ids())

    def sync(self) -> None:
        """Re-read the selection after a programmatic ``set_selected``."""
        self._items = self._select.get_selected()

    def remove(self, option_id: str) -> None:
        """Drop ``option_id`` from the widget, then re-read what it holds.

        An unavailable widget ignores the write, so the tag stays.
        """
        remaining = [option for option in self._items if option.id != option_id]
        if len(remaining) == len(self._items):
            return
        if self._select.mode is SelectMode.SINGLE:
            self._select.set_selected([])
        else:
            self._select.set_selected(remaining)
        self._items = self._select.get_selected()

    def detach(self) -> None:
        self._unsubscribe()
