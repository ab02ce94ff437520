"""
Configuration module for the Live URL Editor.

Submodules:
    - models: Configuration dataclasses (AppConfig, FieldConfig, etc.)
    - defaults: Default field layout and app configuration
"""

from .defaults import DEFAULT_CONFIG, URL_FIELDS
from .models import AppConfig, FieldConfig, ParamEditorConfig

__all__ = [
    # Models
    "AppConfig",
    "FieldConfig",
    "ParamEditorConfig",
    # Defaults
    "DEFAULT_CONFIG",
    "URL_FIELDS",
]
