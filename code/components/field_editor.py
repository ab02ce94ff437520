"""Structured URL field inputs (protocol, host, port, search, anchor)."""

import logging
from typing import TYPE_CHECKING, Dict

import panel as pn

from core.url_model import get_field

from .base import BaseComponent

if TYPE_CHECKING:
    from config import AppConfig
    from core.sync_engine import SyncEngine

logger = logging.getLogger(__name__)


class UrlFieldsPanel(BaseComponent):
    """
    Component with one text input per structured URL field.

    Field names follow the browser location object (``protocol`` is shown
    as "https:", ``search`` as "?a=1", ``hash`` as "#top"). Typing in a
    field is a structured edit.
    """

    def __init__(self, engine: "SyncEngine", config: "AppConfig"):
        """Initialize the fields panel."""
        super().__init__(engine, config)
        self.field_widgets: Dict[str, pn.widgets.TextInput] = {}
        self.engine.param.watch(self._on_state_change, "state")

    def create(self) -> pn.Column:
        """Create the field inputs UI."""
        structured = self.engine.state.structured
        rows = []
        for field_config in self.config.fields:
            widget = pn.widgets.TextInput(
                name=field_config.label,
                value=get_field(structured, field_config.name),
                placeholder=field_config.placeholder,
                sizing_mode="stretch_width",
            )
            widget.param.watch(
                lambda event, name=field_config.name: self._on_field_input(name, event.new),
                "value_input",
            )
            self.field_widgets[field_config.name] = widget
            rows.append(widget)

        return pn.Column(*rows, sizing_mode="stretch_width")

    def _on_field_input(self, name: str, value: str) -> None:
        """Send a field edit to the engine."""
        if value is None or value == get_field(self.engine.state.structured, name):
            return
        logger.debug(f"Field edit: {name}={value!r}")
        self.engine.edit_field(name, value)

    def _on_state_change(self, event) -> None:
        """Refresh every input from the new structured URL."""
        structured = event.new.structured
        for name, widget in self.field_widgets.items():
            display = get_field(structured, name)
            if widget.value != display:
                widget.value = display
