"""Full-screen prompt_toolkit picker driving a SearchableSelect."""

from __future__ import annotations

import asyncio
from typing import Any

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, VSplit, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame, TextArea
from rich.console import Console

from jp_select.models import DropdownState, Option, SelectMode, SelectViewModel
from jp_select.searchable import SearchableSelect
from jp_ui import theme
from jp_ui.rich_view import render_option_preview

Fragment = tuple[str, str]


class SelectPrompt:
    """Search box + option list + preview over a SearchableSelect.

    The prompt is the widget's mount point: every render from the widget
    invalidates the application. Enter selects the highlighted row (and
    finishes in single mode), Ctrl+S finishes a multiple selection, Ctrl+X
    removes the highlighted row from the selection, Ctrl+R retries a failed
    load and Escape cancels.
    """

    def __init__(
        self,
        select: SearchableSelect,
        *,
        title: str = "Select",
        input: Input | None = None,
        output: Output | None = None,
    ) -> None:
        self.select = select
        self.title = title
        self._view: SelectViewModel | None = None
        self._console = Console(force_terminal=True, color_system="truecolor")

        self.search = TextArea(height=1, prompt="Search: ", multiline=False, style="class:search")
        self.search.text = select.query
        self.header_control = FormattedTextControl(self._header_fragments)
        self.list_control = FormattedTextControl(self._list_fragments, focusable=True)
        self.preview_control = FormattedTextControl(self._preview_ansi)
        self.kb = self._keybindings()

        inner = HSplit(
            [
                Window(height=1, content=self.header_control),
                self.search,
                Window(height=1, char="-", style="class:separator"),
                VSplit(
                    [
                        Window(self.list_control, width=Dimension(weight=1)),
                        Window(width=1, char="|", style="class:separator"),
                        Window(self.preview_control, width=Dimension(weight=1)),
                    ],
                    padding=1,
                ),
                Window(height=1, content=FormattedTextControl(self._footer_fragments)),
            ]
        )
        self.app: Application = Application(
            layout=Layout(Frame(inner, title=title), focused_element=self.search),
            key_bindings=self.kb,
            style=Style.from_dict(theme.PROMPT_STYLES),
            full_screen=True,
            input=input,
            output=output,
        )

        self.search.buffer.on_text_changed += lambda _: self.select.set_query(self.search.text)
        select.mount(self)

    # -- SelectContainer ---------------------------------------------------

    def render(self, view: SelectViewModel) -> None:
        self._view = view
        if hasattr(self, "app"):
            self.app.invalidate()

    def clear(self) -> None:
        self._view = None

    # -- fragments ---------------------------------------------------------

    @property
    def view(self) -> SelectViewModel:
        return self._view if self._view is not None else self.select.view()

    def _header_fragments(self) -> list[Fragment]:
        view = self.view
        style = "class:placeholder" if view.placeholder_visible else "class:header"
        return [(style, f" {view.header_text}")]

    def _list_fragments(self) -> list[Fragment]:
        view = self.view
        frags: list[Fragment] = []
        for row in view.rows:
            marker = "▸" if row.highlighted else " "
            checkbox = ("[x]" if row.selected else "[ ]") if view.multiple else "   "
            style = ""
            if row.highlighted:
                style = "class:highlighted"
            elif row.selected:
                style = "class:checked"
            frags.append((style, f" {marker} {checkbox} {row.label}"))
            if row.secondary_text:
                frags.append(("class:secondary", f"  {row.secondary_text}"))
            frags.append(("", "\n"))
        if view.message:
            style = "class:unavailable" if view.state is DropdownState.UNAVAILABLE else "class:message"
            frags.append((style, f" {view.message}\n"))
        if view.has_more:
            frags.append(("class:secondary", " More matches: refine the search\n"))
        return frags

    def _footer_fragments(self) -> list[Fragment]:
        if self.select.mode is SelectMode.MULTIPLE:
            hint = "Enter=add  Ctrl+X=remove  Ctrl+S=done  Ctrl+R=retry  Esc=cancel"
        else:
            hint = "Enter=select  Ctrl+R=retry  Esc=cancel"
        return [("class:secondary", f" {hint}")]

    def _highlighted_option(self) -> Option | None:
        for row in self.view.rows:
            if row.highlighted:
                for option in self.select.options:
                    if option.id == row.id:
                        return option
        return None

    def _preview_ansi(self) -> ANSI:
        option = self._highlighted_option()
        if option is None:
            return ANSI("")
        with self._console.capture() as cap:
            self._console.print(render_option_preview(option))
        return ANSI(cap.get())

    # -- keys --------------------------------------------------------------

    def _exit(self, result: Any) -> None:
        """Exit the prompt, ignoring duplicate-exit errors."""
        try:
            self.app.exit(result=result)
        except Exception as exc:
            if "Return value already set" not in str(exc):
                raise

    def _keybindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("down")
        def _(event: Any) -> None:
            self.select.move_highlight(1)

        @kb.add("up")
        def _(event: Any) -> None:
            self.select.move_highlight(-1)

        @kb.add("enter")
        def _(event: Any) -> None:
            self.select.select_highlighted()
            if self.select.mode is SelectMode.SINGLE and self.select.get_selected():
                self._exit(self.select.get_selected())

        @kb.add("c-x")
        def _(event: Any) -> None:
            option = self._highlighted_option()
            if option is not None:
                self.select.remove_selected(option.id)

        @kb.add("c-s")
        def _(event: Any) -> None:
            self._exit(self.select.get_selected())

        @kb.add("c-r")
        def _(event: Any) -> None:
            self.select.refresh()

        @kb.add("c-l")
        def _(event: Any) -> None:
            self.search.text = ""

        @kb.add("escape")
        def _(event: Any) -> None:
            self.select.close()
            self._exit(None)

        @kb.add("c-c")
        def _(event: Any) -> None:
            self._exit(None)

        return kb

    # -- run ---------------------------------------------------------------

    async def run_async(self) -> list[Option] | None:
        """Open the widget inside the running loop and drive the prompt."""
        self.select.open()
        return await self.app.run_async()

    def run(self) -> list[Option] | None:
        return asyncio.run(self.run_async())
