"""prompt_toolkit frontend for select widgets."""

from jp_ui.tui.select_prompt import SelectPrompt

__all__ = ["SelectPrompt"]
