"""Public API surface for jp_select."""

from jp_select.config import SelectConfig
from jp_select.custom import CustomSelect
from jp_select.filtering import FilterResult, filter_options, matches_query
from jp_select.loaders import JsonListFetcher, http_loader
from jp_select.models import (
    DropdownState,
    LoadStatus,
    Option,
    OptionRow,
    SelectionState,
    SelectMode,
    SelectViewModel,
)
from jp_select.normalize import (
    Err,
    Ok,
    coerce_options,
    field_mapper,
    normalize_response,
    parse_json_list,
    records_to_options,
    user_to_option,
)
from jp_select.protocols import SelectContainer
from jp_select.searchable import SearchableSelect
from jp_select.tags import SelectionTags, Tag
from jp_select.viewmodel import SelectSnapshot, render_select

__all__ = [
    "coerce_options",
    "CustomSelect",
    "DropdownState",
    "Err",
    "field_mapper",
    "filter_options",
    "FilterResult",
    "http_loader",
    "JsonListFetcher",
    "LoadStatus",
    "matches_query",
    "normalize_response",
    "Ok",
    "Option",
    "OptionRow",
    "parse_json_list",
    "records_to_options",
    "render_select",
    "SearchableSelect",
    "SelectConfig",
    "SelectContainer",
    "SelectionState",
    "SelectionTags",
    "SelectMode",
    "SelectSnapshot",
    "SelectViewModel",
    "Tag",
    "user_to_option",
]
