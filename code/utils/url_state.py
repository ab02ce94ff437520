"""URL state helpers over Panel's browser location.

The editor never uses ``location.sync()``: a bidirectional binding would
write the text back into the widget every time the URL changes, which is
the loop the sync engine is there to prevent. Instead the value is read
once on startup and written on every settled change.
"""

import logging
from typing import Any, Optional
from urllib.parse import parse_qs, urlunsplit

import panel as pn

logger = logging.getLogger(__name__)


def get_location():
    """Return the session's Location object, or None outside a browser session."""
    return pn.state.location


def get_url_param(param_name: str, default: Any = None) -> Optional[str]:
    """Read a single URL parameter value.

    Args:
        param_name: URL parameter name
        default: Default value if param not found

    Returns:
        Parameter value or default
    """
    location = get_location()
    if location is None:
        return default
    query_string = location.search or ""
    if query_string.startswith("?"):
        query_string = query_string[1:]
    params = parse_qs(query_string, keep_blank_values=True)
    values = params.get(param_name, [])
    return values[0] if values else default


def get_location_href() -> str:
    """Current location as a full URL string ("" when unknown)."""
    location = get_location()
    if location is None:
        return ""
    if location.href:
        return location.href
    # Before the browser reports href, rebuild it from the parts Panel has
    netloc = location.hostname or ""
    if location.port:
        netloc = f"{netloc}:{location.port}"
    if not netloc:
        return ""
    return urlunsplit(
        (
            (location.protocol or "http:").rstrip(":"),
            netloc,
            location.pathname or "/",
            (location.search or "").lstrip("?"),
            (location.hash or "").lstrip("#"),
        )
    )


def update_url_param(param_name: str, value: Any) -> None:
    """Update a single URL parameter, pushing a browser history entry.

    Args:
        param_name: URL parameter name
        value: New value
    """
    location = get_location()
    if location is None:
        logger.warning(f"No browser location available, dropping update of '{param_name}'")
        return
    location.update_query(**{param_name: value})

