"""Utility functions for the URL editor app."""

from .url_state import get_location, get_location_href, get_url_param, update_url_param

__all__ = ["get_location", "get_location_href", "get_url_param", "update_url_param"]
