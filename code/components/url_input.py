"""Raw URL text input."""

import logging
from typing import TYPE_CHECKING

import panel as pn

from .base import BaseComponent

if TYPE_CHECKING:
    from config import AppConfig
    from core.sync_engine import SyncEngine

logger = logging.getLogger(__name__)


class UrlTextInput(BaseComponent):
    """
    Component for editing the URL as free text.

    Every keystroke is a text edit. Text derived from a field edit is
    written back into the input without being sent to the engine again.
    """

    def __init__(self, engine: "SyncEngine", config: "AppConfig"):
        """Initialize the text input."""
        super().__init__(engine, config)
        self.text_widget = None
        self.engine.param.watch(self._on_state_change, "state")

    def create(self) -> pn.widgets.TextInput:
        """Create the text input widget."""
        self.text_widget = pn.widgets.TextInput(
            name="URL",
            value=self.engine.state.text,
            placeholder=self.config.default_url,
            sizing_mode="stretch_width",
        )
        self.text_widget.param.watch(self._on_text_input, "value_input")
        return self.text_widget

    def _on_text_input(self, event) -> None:
        """Send typed text to the engine."""
        if event.new is None or event.new == self.engine.state.text:
            return
        self.engine.edit_text(event.new)

    def _on_state_change(self, event) -> None:
        """Mirror the engine's text into the input."""
        if self.text_widget is None:
            return
        text = event.new.text
        if self.text_widget.value != text:
            self.text_widget.value = text
