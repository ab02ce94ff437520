"""
Location bridges: mirror the settled URL text into the host's address bar.

The sync engine only talks to the LocationBridge interface, so it can be
driven by Panel's browser location in a served app and by an in-memory
history in tests.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional
from urllib.parse import parse_qs, parse_qsl, urlencode, urlsplit, urlunsplit

from utils import get_location, get_location_href, get_url_param, update_url_param

if TYPE_CHECKING:
    from config import AppConfig

logger = logging.getLogger(__name__)


class LocationBridge(ABC):
    """
    Abstract interface to the host's addressable location and history.

    Implementations store the editor value under a designated query key
    (``url`` by default) of the host's own location.
    """

    def __init__(self, url_param: str = "url"):
        """
        Initialize the bridge.

        Args:
            url_param: Query key that carries the edited URL
        """
        self.url_param = url_param

    @abstractmethod
    def publish(self, text: str) -> None:
        """
        Push a new history entry whose location carries ``text``.

        Args:
            text: Settled URL text
        """
        pass

    @abstractmethod
    def initial(self) -> str:
        """
        Return the starting value for the editor.

        Returns:
            The designated query parameter if present, else the current
            location itself
        """
        pass


class InMemoryLocationBridge(LocationBridge):
    """Location bridge backed by a plain list of history entries."""

    def __init__(self, href: str = "http://localhost/", url_param: str = "url"):
        super().__init__(url_param)
        self.history: List[str] = [href]

    @property
    def href(self) -> str:
        """Location of the newest history entry."""
        return self.history[-1]

    def publish(self, text: str) -> None:
        parts = urlsplit(self.href)
        # The first occurrence of the key is replaced in place, later ones dropped
        query = []
        replaced = False
        for key, value in parse_qsl(parts.query, keep_blank_values=True):
            if key != self.url_param:
                query.append((key, value))
            elif not replaced:
                query.append((key, text))
                replaced = True
        if not replaced:
            query.append((self.url_param, text))
        next_href = urlunsplit(
            (parts.scheme, parts.netloc, parts.path, urlencode(query), parts.fragment)
        )
        self.history.append(next_href)
        logger.debug(f"History entry #{len(self.history)}: {next_href}")

    def initial(self) -> str:
        query = parse_qs(urlsplit(self.href).query, keep_blank_values=True)
        return query.get(self.url_param, [""])[0] or self.href


class PanelLocationBridge(LocationBridge):
    """Location bridge over ``pn.state.location`` of the current session."""

    def publish(self, text: str) -> None:
        # Changing the search of Panel's Location pushes a browser history entry
        update_url_param(self.url_param, text)

    def initial(self) -> str:
        return get_url_param(self.url_param) or get_location_href()


def create_location_bridge(config: Optional["AppConfig"] = None) -> LocationBridge:
    """
    Pick the bridge for the current environment.

    Args:
        config: App configuration providing the query key and fallback URL

    Returns:
        PanelLocationBridge inside a browser session, otherwise an
        InMemoryLocationBridge seeded with the configured default URL
    """
    url_param = config.url_param if config else "url"
    if get_location() is not None:
        return PanelLocationBridge(url_param=url_param)

    default_url = config.default_url if config else "http://localhost/"
    logger.info("No browser location available, keeping URL history in memory")
    return InMemoryLocationBridge(href=default_url, url_param=url_param)
