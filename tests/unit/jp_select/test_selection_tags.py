"""Tests for the tag list mirroring a select's selection."""

from __future__ import annotations

import json

import pytest

from jp_select.models import Option, SelectMode
from jp_select.searchable import SearchableSelect
from jp_select.tags import SelectionTags

pytestmark = pytest.mark.unit_select


EDITORS = [
    Option(id="e1", label="Ada Lovelace", secondary_text="ada@journal.org"),
    Option(id="e2", label="Alan Turing", secondary_text="alan@journal.org"),
]


def test_tags_follow_selection_changes() -> None:
    select = SearchableSelect(EDITORS, mode=SelectMode.MULTIPLE)
    tags = SelectionTags(select, empty_message="No editors selected")
    assert tags.empty_message == "No editors selected"

    select.select_option("e1")
    select.select_option("e2")

    assert [t.label for t in tags.tags] == ["Ada Lovelace", "Alan Turing"]
    assert tags.empty_message is None
    assert json.loads(tags.value_json()) == ["e1", "e2"]


def test_remove_updates_widget_without_echo() -> None:
    select = SearchableSelect(EDITORS, mode=SelectMode.MULTIPLE)
    tags = SelectionTags(select)
    seen: list[list[str]] = []
    select.subscribe(lambda selected: seen.append([o.id for o in selected]))
    select.select_option("e1")
    select.select_option("e2")
    seen.clear()

    tags.remove("e1")

    assert tags.ids() == ["e2"]
    assert [o.id for o in select.get_selected()] == ["e2"]
    assert seen == []


def test_remove_unknown_tag_is_noop() -> None:
    select = SearchableSelect(EDITORS, mode=SelectMode.MULTIPLE)
    tags = SelectionTags(select)
    select.select_option("e1")
    tags.remove("zz")
    assert tags.ids() == ["e1"]


def test_remove_while_unavailable_keeps_tags_in_sync() -> None:
    attempts = 0

    def loader() -> list[Option]:
        nonlocal attempts
        attempts += 1
        if attempts > 1:
            raise RuntimeError("offline")
        return list(EDITORS)

    select = SearchableSelect(loader, mode=SelectMode.MULTIPLE)
    tags = SelectionTags(select)
    select.open()
    select.select_option("e1")
    select.select_option("e2")
    select.refresh()
    assert select.available is False

    tags.remove("e1")

    assert tags.ids() == ["e1", "e2"]
    assert [o.id for o in select.get_selected()] == ["e1", "e2"]
    assert json.loads(tags.value_json()) == ["e1", "e2"]


def test_single_mode_remove_clears_selection() -> None:
    select = SearchableSelect(EDITORS)
    tags = SelectionTags(select)
    select.select_option("e2")
    tags.remove("e2")
    assert select.get_selected() == []
    assert tags.tags == []


def test_sync_after_programmatic_prefill() -> None:
    select = SearchableSelect(EDITORS, mode=SelectMode.MULTIPLE)
    tags = SelectionTags(select)
    select.set_selected(["e2"])
    assert tags.ids() == []
    tags.sync()
    assert tags.ids() == ["e2"]


def test_detach_stops_updates() -> None:
    select = SearchableSelect(EDITORS, mode=SelectMode.MULTIPLE)
    tags = SelectionTags(select)
    tags.detach()
    select.select_option("e1")
    assert tags.ids() == []
