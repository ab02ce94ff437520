"""Panel components of the URL editor."""

from .base import BaseComponent
from .error_banner import ErrorBanner
from .field_editor import UrlFieldsPanel
from .query_param_editor import QueryParamEditor
from .url_input import UrlTextInput

__all__ = [
    "BaseComponent",
    "ErrorBanner",
    "QueryParamEditor",
    "UrlFieldsPanel",
    "UrlTextInput",
]
