"""Query parameter editor using Tabulator."""

import logging
from typing import TYPE_CHECKING

import panel as pn

from .base import BaseComponent

if TYPE_CHECKING:
    from config import AppConfig
    from core.sync_engine import SyncEngine

logger = logging.getLogger(__name__)

REMOVE_COLUMN = "remove"


class QueryParamEditor(BaseComponent):
    """
    Component for editing the query string one parameter at a time.

    Shows a table with editable key/value cells and a remove button per
    row, plus an add button. Every row action is a structured edit that
    regenerates the whole query string.
    """

    def __init__(self, engine: "SyncEngine", config: "AppConfig"):
        """Initialize the parameter editor."""
        super().__init__(engine, config)
        self.table_widget = None
        self.add_button = None
        self.engine.param.watch(self._on_state_change, "state")

    def create(self) -> pn.Column:
        """Create the parameter table UI."""
        editor_config = self.config.param_editor

        self.table_widget = pn.widgets.Tabulator(
            self.engine.state.params.to_frame(),
            buttons={REMOVE_COLUMN: editor_config.remove_button_label},
            show_index=editor_config.show_index,
            selectable=False,
            height=editor_config.table_height,
            sizing_mode="stretch_width",
        )
        self.table_widget.on_edit(self._on_cell_edit)
        self.table_widget.on_click(self._on_cell_click)

        self.add_button = pn.widgets.Button(
            name=editor_config.add_button_label,
            button_type="primary",
            width=80,
        )
        self.add_button.on_click(self._on_add)

        return pn.Column(
            pn.Row(pn.pane.Markdown("### Search Params"), self.add_button),
            self.table_widget,
            sizing_mode="stretch_width",
        )

    def _on_cell_edit(self, event) -> None:
        """Update the key or value of the edited row."""
        if event.column not in ("key", "value"):
            return
        value = "" if event.value is None else str(event.value)
        self.engine.set_param(int(event.row), event.column, value)

    def _on_cell_click(self, event) -> None:
        """Remove a row when its remove button is clicked."""
        if event.column != REMOVE_COLUMN:
            return
        logger.info(f"Removing query parameter #{event.row}")
        self.engine.remove_param(int(event.row))

    def _on_add(self, _event) -> None:
        self.engine.append_param()

    def _on_state_change(self, event) -> None:
        """Reload the table when the parameter list changed."""
        if self.table_widget is None:
            return
        frame = event.new.params.to_frame()
        if not frame.equals(self.table_widget.value):
            self.table_widget.value = frame
