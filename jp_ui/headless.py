"""Headless mount point used by scripted runs and tests."""

from __future__ import annotations

from dataclasses import dataclass, field

from jp_select.models import SelectViewModel


@dataclass
class RecordingContainer:
    """Records every view model rendered into it."""

    views: list[SelectViewModel] = field(default_factory=list)
    clear_count: int = 0

    def render(self, view: SelectViewModel) -> None:
        self.views.append(view)

    def clear(self) -> None:
        self.clear_count += 1

    @property
    def last(self) -> SelectViewModel | None:
        return self.views[-1] if self.views else None

    def visible_ids(self) -> list[str]:
        if self.last is None:
            return []
        return [row.id for row in self.last.rows]
