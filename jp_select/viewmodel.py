"""Pure rendering of select state into a SelectViewModel.

Nothing here touches a frontend; prompt_toolkit, Rich and the headless mount all
draw from the view model produced by :func:`render_select`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from jp_select.config import SelectConfig
from jp_select.filtering import FilterResult, filter_options
from jp_select.models import (
    DropdownState,
    LoadStatus,
    Option,
    OptionRow,
    SelectionState,
    SelectMode,
    SelectViewModel,
)


@dataclass(frozen=True)
class SelectSnapshot:
    state: SelectionState
    status: LoadStatus
    options: tuple[Option, ...]
    config: SelectConfig = field(default_factory=SelectConfig)
    placeholder: str | None = None
    highlight: int = 0
    searchable: bool = True


def dropdown_state(open_: bool, status: LoadStatus) -> DropdownState:
    if not open_:
        return DropdownState.CLOSED
    if status is LoadStatus.LOADING:
        return DropdownState.LOADING
    if status is LoadStatus.FAILED:
        return DropdownState.UNAVAILABLE
    return DropdownState.OPEN


def visible_options(snapshot: SelectSnapshot) -> FilterResult:
    if snapshot.status is not LoadStatus.READY:
        return FilterResult(visible=[], total_matches=0)
    query = snapshot.state.query if snapshot.searchable else ""
    return filter_options(
        snapshot.options,
        query,
        snapshot.config.display_limit,
        fuzzy=snapshot.config.fuzzy,
        fuzzy_score_cutoff=snapshot.config.fuzzy_score_cutoff,
    )


def clamp_highlight(index: int, row_count: int) -> int:
    if row_count <= 0:
        return 0
    return max(0, min(index, row_count - 1))


def header_text(snapshot: SelectSnapshot) -> tuple[str, bool]:
    """Return the header label and whether it is the placeholder."""
    selected = snapshot.state.selected
    if not selected:
        return snapshot.placeholder or snapshot.config.placeholder, True
    if len(selected) == 1:
        return selected[0].label, False
    return snapshot.config.summary_text(len(selected)), False


def _message(snapshot: SelectSnapshot, result: FilterResult) -> str | None:
    config = snapshot.config
    if snapshot.status is LoadStatus.FAILED:
        return config.unavailable_text
    if snapshot.status in (LoadStatus.PENDING, LoadStatus.LOADING):
        return config.loading_text
    if not snapshot.options:
        return config.empty_text
    if not result.visible:
        return config.no_results_text
    return None


def render_select(snapshot: SelectSnapshot) -> SelectViewModel:
    result = visible_options(snapshot)
    highlight = clamp_highlight(snapshot.highlight, len(result.visible))
    selected_ids = set(snapshot.state.selected_ids())
    rows = tuple(
        OptionRow(
            id=option.id,
            label=option.label,
            secondary_text=option.secondary_text,
            selected=option.id in selected_ids,
            highlighted=i == highlight,
        )
        for i, option in enumerate(result.visible)
    )
    text, is_placeholder = header_text(snapshot)
    query = snapshot.state.query if snapshot.searchable else ""
    return SelectViewModel(
        header_text=text,
        placeholder_visible=is_placeholder,
        state=dropdown_state(snapshot.state.open, snapshot.status),
        rows=rows,
        message=_message(snapshot, result),
        search_text=query,
        search_placeholder=snapshot.config.search_placeholder if snapshot.searchable else "",
        clear_search_visible=bool(query.strip()),
        has_more=result.has_more,
        searchable=snapshot.searchable,
        multiple=snapshot.state.mode is SelectMode.MULTIPLE,
    )
