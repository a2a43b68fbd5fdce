"""Headless select widgets for the journal portal forms.

Provides the searchable single/multiple select, the plain dropdown variant and
their companion tag list, independent of any frontend.
"""

from jp_select.api import (
    CustomSelect,
    DropdownState,
    Option,
    SearchableSelect,
    SelectConfig,
    SelectionTags,
    SelectMode,
)

__all__ = [
    "CustomSelect",
    "DropdownState",
    "Option",
    "SearchableSelect",
    "SelectConfig",
    "SelectionTags",
    "SelectMode",
]
