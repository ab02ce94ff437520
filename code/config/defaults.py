"""
Default configuration for the Live URL Editor.

The structured inputs mirror the fields of the browser's location object.
"""

from .models import AppConfig, FieldConfig

# =============================================================================
# Structured Fields
# =============================================================================

URL_FIELDS = [
    FieldConfig(name="protocol", label="Protocol", placeholder="https:"),
    FieldConfig(name="hostname", label="Host", placeholder="example.com"),
    FieldConfig(name="port", label="Port", placeholder="8080"),
    FieldConfig(name="search", label="Search", placeholder="?key=value"),
    FieldConfig(name="hash", label="Anchor", placeholder="#section"),
]


# =============================================================================
# App Configuration
# =============================================================================

DEFAULT_CONFIG = AppConfig(fields=list(URL_FIELDS))
