"""Frontends for jp_select widgets: Rich rendering, headless mount, prompt_toolkit picker and CLI."""

from jp_ui.headless import RecordingContainer
from jp_ui.rich_view import RichContainer, render_view

__all__ = ["RecordingContainer", "RichContainer", "render_view"]
