"""Tests for SelectConfig."""

from __future__ import annotations

import pytest

from jp_common.errors import ConfigurationError
from jp_select.config import SelectConfig
from jp_select.searchable import SearchableSelect

pytestmark = pytest.mark.unit_select


def test_defaults() -> None:
    config = SelectConfig()
    assert config.display_limit == 5
    assert config.fuzzy is False
    assert config.no_results_text == "No results found"
    assert config.summary_text(3) == "3 selected"


def test_from_env_reads_variables() -> None:
    config = SelectConfig.from_env({"JP_SELECT_DISPLAY_LIMIT": "12", "JP_SELECT_FUZZY": "yes"})
    assert config.display_limit == 12
    assert config.fuzzy is True


def test_from_env_ignores_invalid_variables() -> None:
    config = SelectConfig.from_env({"JP_SELECT_DISPLAY_LIMIT": "zero", "JP_SELECT_FUZZY": " "})
    assert config.display_limit == 5
    assert config.fuzzy is False


def test_explicit_overrides_win_and_none_is_skipped() -> None:
    config = SelectConfig.from_env(
        {"JP_SELECT_DISPLAY_LIMIT": "12"},
        display_limit=3,
        placeholder=None,
    )
    assert config.display_limit == 3
    assert config.placeholder == "Select an option"


def test_invalid_override_raises_configuration_error() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        SelectConfig.from_env({}, display_limit=0)
    assert excinfo.value.context["values"] == {"display_limit": 0}


def test_widget_display_limit_raises_configuration_error() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        SearchableSelect([], display_limit=0)
    assert excinfo.value.context["values"]["display_limit"] == 0


def test_with_overrides_keeps_other_fields() -> None:
    base = SelectConfig(placeholder="Search for reviewers...")
    config = base.with_overrides(display_limit=8, fuzzy=None)
    assert config.display_limit == 8
    assert config.placeholder == "Search for reviewers..."
    assert config.fuzzy is False
