"""
Application class wiring the sync engine to the Panel UI.

This module provides:
- The SyncEngine as the single owner of URL state
- A LocationBridge chosen for the current session
- Component creation and the template layout
"""

import logging
from typing import Any, Dict, Optional

import panel as pn
import param

from components import ErrorBanner, QueryParamEditor, UrlFieldsPanel, UrlTextInput
from config import DEFAULT_CONFIG, AppConfig

from .location import LocationBridge, create_location_bridge
from .sync_engine import SyncEngine

logger = logging.getLogger(__name__)


class UrlEditorApp(param.Parameterized):
    """
    Live URL editor: a raw text input and structured fields kept in sync.

    Components only render engine state and forward edits; the engine does
    all reconciliation and publishes settled URLs through the bridge.
    """

    config = param.ClassSelector(class_=AppConfig, default=None, doc="App configuration")

    def __init__(self, bridge: Optional[LocationBridge] = None, **params):
        """
        Initialize the app.

        Args:
            bridge: Location bridge to use (default: picked for the session)
            **params: Optional parameters
        """
        super().__init__(**params)
        if self.config is None:
            self.config = DEFAULT_CONFIG
        self.bridge = bridge or create_location_bridge(self.config)
        self.engine = SyncEngine.from_bridge(self.bridge, self.config)
        self._components: Dict[str, Any] = {}
        self._init_components()

    def _init_components(self) -> None:
        """Create component instances sharing the engine."""
        self._components["url_input"] = UrlTextInput(self.engine, self.config)
        self._components["error_banner"] = ErrorBanner(self.engine, self.config)
        self._components["fields"] = UrlFieldsPanel(self.engine, self.config)
        self._components["params"] = QueryParamEditor(self.engine, self.config)

    def create_main_content(self) -> pn.Column:
        """Create the editor: text input, error, fields and parameters."""
        return pn.Column(
            self._components["url_input"].create(),
            pn.layout.Divider(),
            self._components["error_banner"].create(),
            self._components["fields"].create(),
            pn.layout.Divider(),
            self._components["params"].create(),
            sizing_mode="stretch_width",
        )

    def main_layout(
        self,
        header_background: str = "#0072B5",
    ) -> pn.template.BootstrapTemplate:
        """
        Construct the full application layout.

        Args:
            header_background: Header background color

        Returns:
            BootstrapTemplate ready to serve
        """
        return pn.template.BootstrapTemplate(
            title=self.config.app_title,
            header_background=header_background,
            main=[self.create_main_content()],
            theme="default",
        )
