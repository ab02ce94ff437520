"""
Live URL Editor

A Panel app for editing a URL either as raw text or as structured fields,
with the edited URL mirrored into the page's own address bar.

To run:
    panel serve code/app.py --dev --show
"""

import logging

import panel as pn
from bokeh.io import curdoc

from core.base_app import UrlEditorApp

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize Panel extensions
pn.extension("tabulator")


# =============================================================================
# App Initialization
# =============================================================================

curdoc = curdoc()

# Create and serve the app
app = UrlEditorApp()
curdoc.title = app.config.doc_title
layout = app.main_layout()
layout.servable()
