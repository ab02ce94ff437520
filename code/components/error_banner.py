"""Error display for URL text that does not parse."""

import panel as pn

from .base import BaseComponent


class ErrorBanner(BaseComponent):
    """Shows the engine's error channel; hidden while there is no error."""

    def create(self) -> pn.viewable.Viewable:
        """Create the reactive error banner."""
        return pn.bind(self._render, error=self.engine.param.error)

    def _render(self, error: str) -> pn.pane.Markdown:
        if not error:
            return pn.pane.Markdown("", visible=False)
        return pn.pane.Markdown(
            f"**Error:** {error}",
            css_classes=["alert", "alert-danger", "p-2"],
            sizing_mode="stretch_width",
        )
