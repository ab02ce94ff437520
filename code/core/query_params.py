"""
Ordered query parameter list with a canonical query-string codec.

The list is immutable: every edit returns a new QueryParamList, so a
renderer holding the previous value never sees a half-applied change.

Decoding policy for malformed percent escapes is pass-through-literal:
``%zz`` and a lone ``%`` are kept as typed. Well-formed escapes that do not
form valid UTF-8 (e.g. ``%ff``) decode to U+FFFD.
"""

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, Optional, Tuple
from urllib.parse import parse_qsl, urlencode

import pandas as pd

PARAM_FIELDS = ("key", "value")


class ParamIndexError(IndexError):
    """Raised when a list edit addresses a row that does not exist."""

    def __init__(self, index: int, length: int):
        super().__init__(f"Query parameter index {index} out of range (list has {length} entries)")
        self.index = index
        self.length = length


@dataclass(frozen=True)
class QueryParam:
    """A single key/value entry of a query string."""

    key: str = ""
    value: str = ""


@dataclass(frozen=True)
class QueryParamList:
    """
    Ordered, index-addressable list of query parameters.

    Duplicate keys are kept and serialization follows list order.

    Usage:
        params = QueryParamList.parse("a=1&b=2")
        params.remove_at(0).serialize()  # "b=2"
    """

    entries: Tuple[QueryParam, ...] = field(default_factory=tuple)

    @classmethod
    def parse(cls, query_string: str) -> "QueryParamList":
        """
        Parse a query string into an ordered parameter list.

        Args:
            query_string: Raw query string, with or without a leading "?"

        Returns:
            QueryParamList in the order the entries appear
        """
        if query_string.startswith("?"):
            query_string = query_string[1:]
        pairs = parse_qsl(query_string, keep_blank_values=True, errors="replace")
        return cls.from_pairs(pairs)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "QueryParamList":
        """Build a list from (key, value) tuples."""
        return cls(tuple(QueryParam(str(key), str(value)) for key, value in pairs))

    def serialize(self) -> str:
        """Encode the list as ``key=value&key=value`` (empty list gives "")."""
        return urlencode([(entry.key, entry.value) for entry in self.entries])

    def set_at(self, index: int, field_name: str, new_value: str) -> "QueryParamList":
        """
        Return a new list with one field of entry ``index`` replaced.

        Args:
            index: Row to update
            field_name: Either "key" or "value"
            new_value: Replacement text

        Raises:
            ParamIndexError: If index does not address an entry
            ValueError: If field_name is not "key" or "value"
        """
        if field_name not in PARAM_FIELDS:
            raise ValueError(f"Unknown query parameter field: {field_name!r}")
        self._check_index(index)
        entries = list(self.entries)
        entries[index] = replace(entries[index], **{field_name: new_value})
        return QueryParamList(tuple(entries))

    def remove_at(self, index: int) -> "QueryParamList":
        """Return a new list without entry ``index``; later entries shift down."""
        self._check_index(index)
        return QueryParamList(self.entries[:index] + self.entries[index + 1 :])

    def append(self, entry: Optional[QueryParam] = None) -> "QueryParamList":
        """Return a new list with ``entry`` (default empty key/value) at the end."""
        return QueryParamList(self.entries + (entry if entry is not None else QueryParam(),))

    def keys(self) -> list[str]:
        return [entry.key for entry in self.entries]

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value of the first entry named ``key``."""
        for entry in self.entries:
            if entry.key == key:
                return entry.value
        return default

    def to_frame(self) -> pd.DataFrame:
        """Tabular view with ``key`` and ``value`` columns, one row per entry."""
        return pd.DataFrame(
            {
                "key": [entry.key for entry in self.entries],
                "value": [entry.value for entry in self.entries],
            },
            columns=list(PARAM_FIELDS),
        )

    def _check_index(self, index: int) -> None:
        # Negative indices are not list positions a row can have
        if not 0 <= index < len(self.entries):
            raise ParamIndexError(index, len(self.entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[QueryParam]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> QueryParam:
        return self.entries[index]
