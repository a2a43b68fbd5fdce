"""
Command-line interface for the journal-portal select widgets.

`jp-select pick SOURCE` loads options from a JSON file or a portal list
endpoint and lets you search and pick them, interactively or headless.
"""

from __future__ import annotations

import json
import os
import sys
from typing import List, Optional

import typer
from rich.console import Console

from jp_common.api import ConfigurationError, configure_logging
from jp_select.config import SelectConfig
from jp_select.models import Option, SelectMode
from jp_select.searchable import SearchableSelect
from jp_ui import theme
from jp_ui.cli.sources import build_loader
from jp_ui.rich_view import RichContainer, selection_table

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(help="Search and pick journal-portal options (editors, reviewers, ...).", no_args_is_help=True)


def _present(level: str, message: str) -> None:
    err_console.print(theme.presenter_message(level, message))


def _option_payload(option: Option) -> dict[str, str | None]:
    return {"id": option.id, "label": option.label, "secondary_text": option.secondary_text}


@app.callback()
def entry(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (overrides JP_LOG_LEVEL)."),
) -> None:
    """Global options."""
    configure_logging(level=log_level, debug=debug, force=True)


@app.command("pick")
def pick(
    source: str = typer.Argument(..., help="JSON file or http(s) list endpoint."),
    multiple: bool = typer.Option(False, "--multiple", "-m", help="Allow several selections."),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Options shown at once (JP_SELECT_DISPLAY_LIMIT)."),
    query: str = typer.Option("", "--query", "-q", help="Initial search text."),
    select_ids: Optional[List[str]] = typer.Option(None, "--select", "-s", help="Select these ids (repeatable)."),
    placeholder: Optional[str] = typer.Option(None, "--placeholder", help="Header text when nothing is selected."),
    headless: bool = typer.Option(False, "--headless", help="Do not open the interactive picker."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON (headless)."),
    token: Optional[str] = typer.Option(None, "--token", help="Bearer token for URL sources (JP_API_TOKEN)."),
) -> None:
    """Load options from SOURCE and pick one or more of them."""
    try:
        config = SelectConfig.from_env(display_limit=limit, placeholder=placeholder)
        loader = build_loader(source, token=token or os.environ.get("JP_API_TOKEN"))
    except ConfigurationError as exc:
        _present("error", str(exc))
        raise typer.Exit(2)

    container = RichContainer(console, title=source)
    select = SearchableSelect(
        loader,
        container=container,
        mode=SelectMode.MULTIPLE if multiple else SelectMode.SINGLE,
        config=config,
    )

    interactive = not headless and not as_json and sys.stdin.isatty() and sys.stdout.isatty()
    if interactive:
        _pick_interactive(select, source, query)
        return

    select.open()
    if not select.available:
        _present("error", f"Options unavailable: {select.error}")
        raise typer.Exit(1)

    known_ids = {option.id for option in select.options}
    for option_id in select_ids or []:
        if option_id not in known_ids:
            _present("warning", f"Unknown option id: {option_id}")
            continue
        select.select_option(option_id)
    select.set_query(query)

    if as_json:
        payload = {
            "value": select.get_value(),
            "selected": [_option_payload(o) for o in select.get_selected()],
            "visible": [_option_payload(o) for o in select.visible()],
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    select.open()
    container.show()
    if select.get_selected():
        console.print(selection_table(select.get_selected()))


def _pick_interactive(select: SearchableSelect, title: str, query: str) -> None:
    from jp_ui.tui.select_prompt import SelectPrompt

    prompt = SelectPrompt(select, title=title)
    if query:
        prompt.search.text = query
    result = prompt.run()
    if result is None:
        _present("warning", "Selection cancelled.")
        raise typer.Exit(1)
    if not result:
        _present("info", "Nothing selected.")
        return
    console.print(selection_table(result))


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
