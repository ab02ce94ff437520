"""
Bidirectional sync between the URL text and its structured fields.

Every edit goes through one explicit, single-pass transition::

    edit --> tag origin --> reconcile once --> settled state (+ effects)

``apply_edit`` is the pure transition. ``SyncEngine`` owns the current
state, runs the transition for each edit, and executes the resulting
publish effects through a LocationBridge after the new state is in place.

The derived write of a reconciliation (text from fields, or fields from
text) is never treated as a new edit, so there is at most one
reconciliation per edit and no update cycle.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple, Union

import param

from .location import LocationBridge
from .query_params import ParamIndexError, QueryParam, QueryParamList
from .url_model import InvalidUrlError, ParsedUrl, format_url, parse_url, set_field

if TYPE_CHECKING:
    from config import AppConfig

logger = logging.getLogger(__name__)


class Origin(str, Enum):
    """Which representation was edited directly."""

    NONE = "none"
    TEXT = "text"
    STRUCTURED = "structured"


@dataclass(frozen=True)
class UrlState:
    """
    Snapshot of both URL representations.

    Attributes:
        text: The free-form editable URL text
        structured: Last successfully derived structured URL
        origin: Pending reconciliation direction (NONE once settled)
        error: User-visible message of the last failed parse ("" if none)
    """

    text: str
    structured: ParsedUrl
    origin: Origin = Origin.NONE
    error: str = ""

    @property
    def params(self) -> QueryParamList:
        return self.structured.params

    @property
    def is_settled(self) -> bool:
        return self.origin is Origin.NONE


# Edits ------------------------------------------------------------------


@dataclass(frozen=True)
class TextEdit:
    text: str


@dataclass(frozen=True)
class FieldEdit:
    name: str
    value: str


@dataclass(frozen=True)
class SetParam:
    index: int
    field: str
    value: str


@dataclass(frozen=True)
class RemoveParam:
    index: int


@dataclass(frozen=True)
class AppendParam:
    key: str = ""
    value: str = ""


@dataclass(frozen=True)
class ReplaceParams:
    params: QueryParamList


Edit = Union[TextEdit, FieldEdit, SetParam, RemoveParam, AppendParam, ReplaceParams]


@dataclass(frozen=True)
class Publish:
    """Side effect: mirror ``text`` into the host location."""

    text: str


def _edit_params(params: QueryParamList, edit: Edit) -> QueryParamList:
    if isinstance(edit, SetParam):
        return params.set_at(edit.index, edit.field, edit.value)
    if isinstance(edit, RemoveParam):
        return params.remove_at(edit.index)
    if isinstance(edit, AppendParam):
        return params.append(QueryParam(edit.key, edit.value))
    if isinstance(edit, ReplaceParams):
        return edit.params
    raise TypeError(f"Not a query parameter edit: {edit!r}")


def tag_edit(state: UrlState, edit: Edit) -> UrlState:
    """
    Apply the direct mutation of an edit and tag its origin.

    Raises:
        ParamIndexError: If a parameter edit addresses a missing row
        ValueError: If a field edit names an unknown field
    """
    if isinstance(edit, TextEdit):
        return replace(state, text=edit.text, origin=Origin.TEXT)
    if isinstance(edit, FieldEdit):
        structured = set_field(state.structured, edit.name, edit.value)
    else:
        structured = state.structured.with_params(_edit_params(state.params, edit))
    return replace(state, structured=structured, origin=Origin.STRUCTURED)


def reconcile(state: UrlState) -> UrlState:
    """
    Re-derive the representation that was not edited.

    The origin is reset only after the derived value exists, and a failed
    parse also settles, so the same failure is not retried on the next
    unrelated update.
    """
    if state.origin is Origin.TEXT:
        try:
            structured = parse_url(state.text)
        except InvalidUrlError as e:
            logger.info(f"Keeping previous fields, text does not parse: {e.reason}")
            return replace(state, error=str(e), origin=Origin.NONE)
        return replace(state, structured=structured, error="", origin=Origin.NONE)

    if state.origin is Origin.STRUCTURED:
        return replace(state, text=format_url(state.structured), error="", origin=Origin.NONE)

    return state


def apply_edit(state: UrlState, edit: Edit) -> Tuple[UrlState, List[Publish]]:
    """
    Run one complete transition for ``edit``.

    Args:
        state: Current settled state
        edit: The user's edit

    Returns:
        Tuple of the new settled state and the side effects the caller
        should execute. Only edits that settle without error publish.
    """
    settled = reconcile(tag_edit(state, edit))
    effects = [] if settled.error else [Publish(settled.text)]
    return settled, effects


def initial_state(text: str, fallback_url: str) -> UrlState:
    """
    Build the startup state for ``text``.

    If text does not parse, the fields show ``fallback_url`` and the error
    is reported while the text is kept as given.
    """
    try:
        return UrlState(text=text, structured=parse_url(text))
    except InvalidUrlError as e:
        logger.warning(f"Initial URL is invalid, showing fields of {fallback_url}: {e.reason}")
        return UrlState(text=text, structured=parse_url(fallback_url), error=str(e))


class SyncEngine(param.Parameterized):
    """
    Owner of the URL state.

    Renderers watch ``state`` (or ``error``) and send user edits back via
    ``dispatch`` or the edit helpers. Each dispatch mutates, reconciles and
    publishes before returning.

    Usage:
        engine = SyncEngine.from_bridge(InMemoryLocationBridge("http://a.com/"))
        engine.edit_field("hostname", "b.com")
        engine.state.text  # "http://b.com/"
    """

    state = param.ClassSelector(class_=UrlState, doc="Current settled URL state")
    error = param.String(default="", doc="Message of the last failed parse")

    def __init__(
        self,
        initial: UrlState,
        bridge: LocationBridge,
        strict: bool = False,
        **params,
    ):
        """
        Initialize the engine.

        Args:
            initial: Starting state (should be settled)
            bridge: Location bridge used to publish settled text
            strict: If True, out-of-range parameter edits raise instead of
                being logged and dropped
        """
        super().__init__(state=initial, error=initial.error, **params)
        self.bridge = bridge
        self.strict = strict
        self.settle_count = 0
        self._last_published: Optional[str] = initial.text
        self._dispatching = False

    @classmethod
    def from_bridge(
        cls, bridge: LocationBridge, config: Optional["AppConfig"] = None
    ) -> "SyncEngine":
        """
        Create an engine seeded from the bridge's initial value.

        Args:
            bridge: Location bridge to read from and publish to
            config: Supplies the fallback URL and strictness
        """
        fallback_url = config.default_url if config else "http://localhost/"
        text = bridge.initial() or fallback_url
        logger.info(f"Starting URL editor with: {text}")
        return cls(
            initial_state(text, fallback_url),
            bridge,
            strict=config.strict_indices if config else False,
        )

    def dispatch(self, edit: Edit) -> UrlState:
        """
        Apply one user edit and publish the settled result.

        Edits arriving while a previous dispatch is still notifying
        observers are derived writes and are ignored.

        Args:
            edit: The user's edit

        Returns:
            The state after the edit
        """
        if self._dispatching:
            logger.warning(f"Ignoring re-entrant edit while settling: {edit!r}")
            return self.state

        self._dispatching = True
        try:
            try:
                new_state, effects = apply_edit(self.state, edit)
            except ParamIndexError as e:
                if self.strict:
                    raise
                logger.warning(f"Dropping query parameter edit: {e}")
                return self.state

            self.settle_count += 1
            logger.debug(f"Settled {type(edit).__name__}: text={new_state.text!r}")
            self.param.update(state=new_state, error=new_state.error)
            for effect in effects:
                self._publish(effect.text)
        finally:
            self._dispatching = False
        return self.state

    def _publish(self, text: str) -> None:
        if text == self._last_published:
            logger.debug("Location already shows this URL, skipping history entry")
            return
        self.bridge.publish(text)
        self._last_published = text
        logger.info(f"Published URL: {text}")

    # Edit helpers used by the UI components

    def edit_text(self, text: str) -> UrlState:
        return self.dispatch(TextEdit(text))

    def edit_field(self, name: str, value: str) -> UrlState:
        return self.dispatch(FieldEdit(name, value))

    def set_param(self, index: int, field: str, value: str) -> UrlState:
        return self.dispatch(SetParam(index, field, value))

    def remove_param(self, index: int) -> UrlState:
        return self.dispatch(RemoveParam(index))

    def append_param(self, key: str = "", value: str = "") -> UrlState:
        return self.dispatch(AppendParam(key, value))

    def replace_params(self, params: QueryParamList) -> UrlState:
        return self.dispatch(ReplaceParams(params))
