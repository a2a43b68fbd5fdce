"""Colours and message templates shared by the Rich and prompt_toolkit frontends."""

from __future__ import annotations

RICH_ACCENT = "blue"
RICH_ACCENT_BOLD = f"bold {RICH_ACCENT}"
RICH_BORDER_STYLE = RICH_ACCENT

ROW_HIGHLIGHT_STYLE = "reverse"
ROW_SELECTED_STYLE = "bold green"
SECONDARY_TEXT_STYLE = "dim"
PLACEHOLDER_STYLE = "dim italic"
MESSAGE_STYLE = "italic"
UNAVAILABLE_STYLE = "bold red"

PRESENTER_TEMPLATES: dict[str, str] = {
    "info": "[blue]ℹ[/blue] {message}",
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
    "success": "[green]✔ {message}[/green]",
}

PROMPT_STYLES: dict[str, str] = {
    "header": "bold",
    "placeholder": "italic fg:#888888",
    "highlighted": "bg:#0000aa fg:white bold",
    "checked": "fg:#00aa00 bold",
    "secondary": "fg:#888888",
    "message": "italic",
    "unavailable": "fg:#aa0000 bold",
    "separator": "fg:#0000aa",
    "frame.border": "fg:#0000aa",
    "frame.label": "fg:#0000aa bold",
    "search": "bg:#eeeeee fg:#000000",
}


def panel_title(text: str) -> str:
    return f"[{RICH_ACCENT_BOLD}]{text}[/{RICH_ACCENT_BOLD}]"


def presenter_message(level: str, message: str) -> str:
    template = PRESENTER_TEMPLATES.get(level, "{message}")
    return template.format(message=message)
