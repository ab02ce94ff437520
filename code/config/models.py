"""
Configuration dataclasses for the Live URL Editor.

This module provides typed configuration classes for the app and its
components.
"""

from dataclasses import dataclass, field


@dataclass
class FieldConfig:
    """One structured URL input, bound to a location-style field name."""

    name: str
    label: str
    placeholder: str = ""


@dataclass
class ParamEditorConfig:
    """Configuration for the query parameter table."""

    table_height: int = 250
    add_button_label: str = "Add +"
    remove_button_label: str = "X"
    show_index: bool = False


@dataclass
class AppConfig:
    """
    Main application configuration.

    Modify this class (or create an instance in ``defaults``) to change how
    the editor is labelled and where it stores its state.
    """

    # App metadata
    app_title: str = "Live URL Editor"
    doc_title: str = "Live URL Editor"

    # Query key on the app's own location that carries the edited URL
    url_param: str = "url"

    # Used when the location is unknown or the initial text does not parse
    default_url: str = "http://localhost/"

    # Raise on out-of-range parameter edits instead of logging them
    strict_indices: bool = False

    # Structured inputs, in display order
    fields: list[FieldConfig] = field(default_factory=list)

    param_editor: ParamEditorConfig = field(default_factory=ParamEditorConfig)
