"""Core sync engine for the live URL editor."""

from .location import (
    InMemoryLocationBridge,
    LocationBridge,
    PanelLocationBridge,
    create_location_bridge,
)
from .query_params import ParamIndexError, QueryParam, QueryParamList
from .sync_engine import (
    AppendParam,
    FieldEdit,
    Origin,
    Publish,
    RemoveParam,
    ReplaceParams,
    SetParam,
    SyncEngine,
    TextEdit,
    UrlState,
    apply_edit,
    initial_state,
    reconcile,
)
from .url_model import InvalidUrlError, ParsedUrl, format_url, get_field, parse_url, set_field

__version__ = "0.1.0"

__all__ = [
    # Query parameters
    "ParamIndexError",
    "QueryParam",
    "QueryParamList",
    # URL model
    "InvalidUrlError",
    "ParsedUrl",
    "format_url",
    "get_field",
    "parse_url",
    "set_field",
    # Sync engine
    "AppendParam",
    "FieldEdit",
    "Origin",
    "Publish",
    "RemoveParam",
    "ReplaceParams",
    "SetParam",
    "SyncEngine",
    "TextEdit",
    "UrlState",
    "apply_edit",
    "initial_state",
    "reconcile",
    # Location
    "InMemoryLocationBridge",
    "LocationBridge",
    "PanelLocationBridge",
    "create_location_bridge",
]
