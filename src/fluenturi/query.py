"""Ordered, duplicate-preserving query string collection."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Mapping, Optional, Tuple
from urllib.parse import quote_plus, unquote_plus

from .errors import MalformedQueryError

QueryPair = Tuple[str, Optional[str]]

# Characters left as-is when encoding values, in addition to the ones
# ``quote_plus`` never encodes (alphanumerics and ``_.-~``).
_VALUE_SAFE_CHARS = "!*()"


def encode_value(value: Optional[str]) -> str:
    if value is None:
        return ""
    return quote_plus(value, safe=_VALUE_SAFE_CHARS)


def decode_value(value: str) -> str:
    return unquote_plus(value)


class QueryCollection:
    """Query parameters kept in insertion order.

    Duplicate keys are allowed and a value of ``None`` stands for a key
    given without ``=``. ``get`` and ``has_key`` match keys
    case-insensitively while ``get_all`` matches them exactly; stored keys
    are never altered.
    """

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._items: List[QueryPair] = []
        if items is not None:
            self.add_all(items)

    @classmethod
    def parse(cls, raw: str) -> "QueryCollection":
        """Parse ``raw`` (without the leading ``?``) into a collection."""
        collection = cls()
        for token in raw.split("&"):
            key, sep, value = token.partition("=")
            if not sep:
                collection.add(key)
            elif not key:
                raise MalformedQueryError(f"Query string arguments must have a key: {token!r}", token)
            else:
                collection.add(key, decode_value(value))
        return collection

    def add(self, key: str, value: Optional[str] = None) -> None:
        self._items.append((key, value))

    def add_all(self, items: Any, values: Optional[Iterable[Optional[str]]] = None) -> None:
        """Append pairs from a mapping, another collection or an iterable of pairs.

        When ``values`` is given, ``items`` is taken as the matching keys and
        the two are zipped together.
        """
        if values is not None:
            pairs: Iterable[QueryPair] = zip(items, values)
        elif isinstance(items, QueryCollection):
            pairs = list(items)
        elif isinstance(items, Mapping):
            pairs = list(items.items())
        else:
            pairs = items
        for key, value in pairs:
            self.add(key, value)

    def get(self, key: str) -> Optional[str]:
        """Return the first value for ``key`` ignoring case, or ``None``."""
        wanted = key.lower()
        for item_key, value in self._items:
            if item_key.lower() == wanted:
                return value
        return None

    def get_all(self, key: str) -> List[Optional[str]]:
        return [value for item_key, value in self._items if item_key == key]

    def has_key(self, key: str) -> bool:
        wanted = key.lower()
        return any(item_key.lower() == wanted for item_key, _ in self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def has_items(self) -> bool:
        return bool(self._items)

    def render(self) -> str:
        """Render as ``key=value`` pairs joined by ``&``, without a leading ``?``."""
        return "&".join(f"{key}={encode_value(value)}" for key, value in self._items)

    def __iter__(self) -> Iterator[QueryPair]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryCollection):
            return NotImplemented
        return self._items == other._items

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"QueryCollection({self._items!r})"


__all__ = ["QueryCollection", "QueryPair", "encode_value", "decode_value"]
