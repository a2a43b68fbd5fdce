"""Rich rendering of select view models."""

from __future__ import annotations

from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from jp_select.models import DropdownState, Option, OptionRow, SelectViewModel
from jp_ui import theme


def _row_text(row: OptionRow, multiple: bool) -> Text:
    marker = "▸" if row.highlighted else " "
    if multiple:
        checkbox = "[x]" if row.selected else "[ ]"
    else:
        checkbox = " ● " if row.selected else "   "
    style = ""
    if row.highlighted:
        style = theme.ROW_HIGHLIGHT_STYLE
    elif row.selected:
        style = theme.ROW_SELECTED_STYLE
    text = Text(f" {marker} {checkbox} ", style=style)
    text.append(row.label, style=style)
    if row.secondary_text:
        text.append(f"  {row.secondary_text}", style=theme.SECONDARY_TEXT_STYLE)
    return text


def render_view(view: SelectViewModel, *, title: str | None = None) -> RenderableType:
    header = Text(
        view.header_text,
        style=theme.PLACEHOLDER_STYLE if view.placeholder_visible else "bold",
    )
    parts: list[RenderableType] = [header]

    if view.state is not DropdownState.CLOSED:
        if view.searchable:
            search = view.search_text or view.search_placeholder
            parts.append(Text(f"Search: {search}", style="" if view.search_text else "dim"))
        parts.extend(_row_text(row, view.multiple) for row in view.rows)
        if view.message:
            style = (
                theme.UNAVAILABLE_STYLE
                if view.state is DropdownState.UNAVAILABLE
                else theme.MESSAGE_STYLE
            )
            parts.append(Text(view.message, style=style))
        if view.has_more:
            parts.append(Text("More matches: refine the search", style="dim"))

    return Panel(
        Group(*parts),
        title=theme.panel_title(title) if title else None,
        border_style=theme.RICH_BORDER_STYLE,
        padding=(0, 1),
    )


def render_option_preview(option: Option) -> RenderableType:
    text = Text()
    text.append("Option\n", style="bold")
    text.append(f"  {option.label}\n")
    text.append(f"  id: {option.id}\n")
    if option.secondary_text:
        text.append(f"  {option.secondary_text}\n")
    if isinstance(option.raw, dict):
        extra = {k: v for k, v in option.raw.items() if isinstance(v, (str, int, float, bool))}
        if extra:
            text.append("\nRecord\n", style="bold")
            for key, value in extra.items():
                text.append(f"  {key}: {value}\n")
    return Panel(text, title="Preview", border_style="cyan", padding=(1, 2))


def selection_table(options: list[Option], *, title: str = "Selected") -> Table:
    table = Table(title=title, show_header=True, header_style=theme.RICH_ACCENT_BOLD)
    table.add_column("ID", style="cyan")
    table.add_column("Label")
    table.add_column("Details", style=theme.SECONDARY_TEXT_STYLE)
    for option in options:
        table.add_row(option.id, option.label, option.secondary_text or "")
    return table


class RichContainer:
    """Mount point that keeps the latest view and prints it on demand."""

    def __init__(self, console: Console | None = None, *, title: str | None = None) -> None:
        self._console = console or Console()
        self._title = title
        self.current: SelectViewModel | None = None

    def render(self, view: SelectViewModel) -> None:
        self.current = view

    def clear(self) -> None:
        self.current = None

    def show(self) -> None:
        if self.current is not None:
            self._console.print(render_view(self.current, title=self._title))
