"""Common base for the editor's widgets.

Every widget talks to the one SyncEngine of the page: it reads
``engine.state`` (or ``engine.error``) and sends edits through the
engine's helpers.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import panel as pn

if TYPE_CHECKING:
    from config import AppConfig
    from core.sync_engine import SyncEngine


class BaseComponent(ABC):
    """
    A widget bound to the shared SyncEngine.

    Widgets never derive one URL representation from the other themselves.
    User input goes out as an edit; the settled state comes back through a
    watcher on ``engine.param.state``. Input events whose value already
    matches the engine are the widget's own write-back and must be skipped.

    Usage:
        class PathInput(BaseComponent):
            def create(self) -> pn.widgets.TextInput:
                self.widget = pn.widgets.TextInput(
                    value=self.engine.state.structured.path
                )
                self.widget.param.watch(self._on_input, "value_input")
                self.engine.param.watch(self._on_state_change, "state")
                return self.widget

            def _on_input(self, event):
                if event.new != self.engine.state.structured.path:
                    self.engine.edit_field("pathname", event.new)

            def _on_state_change(self, event):
                self.widget.value = event.new.structured.path
    """

    def __init__(self, engine: "SyncEngine", config: "AppConfig"):
        self.engine = engine
        self.config = config

    @abstractmethod
    def create(self) -> pn.viewable.Viewable:
        """Build the widget and hook it up to the engine."""
        pass
