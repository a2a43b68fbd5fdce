"""Option, selection state and view model types for the select widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SelectMode(str, Enum):
    """How many options a widget may hold at once."""

    SINGLE = "single"
    MULTIPLE = "multiple"


class DropdownState(str, Enum):
    """Visible lifecycle of a select dropdown."""

    CLOSED = "closed"
    OPEN = "open"
    LOADING = "loading"
    UNAVAILABLE = "unavailable"


class LoadStatus(str, Enum):
    PENDING = "pending"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class Option:
    id: str
    label: str
    secondary_text: str | None = None
    raw: Any = field(default=None, compare=False, repr=False)  # source record

    def search_fields(self) -> tuple[str, str]:
        return self.label.lower(), (self.secondary_text or "").lower()


@dataclass
class SelectionState:
    mode: SelectMode
    selected: list[Option] = field(default_factory=list)
    query: str = ""
    open: bool = False

    def __post_init__(self) -> None:
        if self.mode is SelectMode.SINGLE and len(self.selected) > 1:
            raise ValueError("single-mode selection holds at most one option")

    def selected_ids(self) -> list[str]:
        return [option.id for option in self.selected]

    def has(self, option_id: str) -> bool:
        return any(option.id == option_id for option in self.selected)


@dataclass(frozen=True)
class OptionRow:
    id: str
    label: str
    secondary_text: str | None = None
    selected: bool = False
    highlighted: bool = False


@dataclass(frozen=True)
class SelectViewModel:
    """Frontend-independent description of a rendered select widget."""

    header_text: str
    placeholder_visible: bool
    state: DropdownState
    rows: tuple[OptionRow, ...] = ()
    message: str | None = None
    search_text: str = ""
    search_placeholder: str = ""
    clear_search_visible: bool = False
    has_more: bool = False
    searchable: bool = True
    multiple: bool = False
