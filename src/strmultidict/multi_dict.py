import logging
from collections.abc import Iterable, Iterator
from typing import Any, NamedTuple

from strmultidict.errors import KeyNotFoundError

__all__ = ("Entry", "MultiDict")

logger = logging.getLogger(__name__)

InitialData = dict[str, Any] | Iterable[tuple[str, Any]]


class Entry(NamedTuple):
    key: str
    value: str

    def __str__(self) -> str:
        return f'Entry < "{self.key}":"{self.value}" >'


def _to_str(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


class MultiDict:
    """Ordered sequence of key/value entries where a key may repeat.

    Lookups scan the entries in insertion order, so the first entry added
    for a key is the one returned by ``get`` and removed by ``popone``.
    """

    __slots__ = ("_elements",)

    def __init__(
        self, initial: "InitialData | MultiDict" = None, capacity: int = 0
    ):
        # lists cannot be pre-sized, capacity is accepted as a hint only
        self._elements: list[Entry] = []

        if initial:
            self.extend(initial)

    @classmethod
    def with_capacity(cls, capacity: int) -> "MultiDict":
        return cls(capacity=capacity)

    def extend(self, data: "InitialData | MultiDict"):
        iter_data = data.items() if isinstance(data, (dict, MultiDict)) else data

        for key, value in iter_data:
            values = value if isinstance(value, list) else [value]
            for item in values:
                self.add(key, item)

    def is_empty(self) -> bool:
        return not self._elements

    def add(self, key: str, value: Any):
        self._elements.append(Entry(key, _to_str(value)))

    def get(self, key: str) -> Entry:
        """Return the first entry for ``key``.

        Raises ``KeyNotFoundError`` if no entry has that key.
        """
        for item in self._elements:
            if item.key == key:
                return item
        raise KeyNotFoundError(key)

    def getall(self, key: str) -> "MultiDict":
        """Return a new ``MultiDict`` holding every entry for ``key``.

        The result does not share storage with this instance. Raises
        ``KeyNotFoundError`` instead of returning an empty result.
        """
        results = type(self)()
        results._elements = [item for item in self._elements if item.key == key]

        if results.is_empty():
            raise KeyNotFoundError(key)
        return results

    def contains(self, key: str) -> bool:
        return any(item.key == key for item in self._elements)

    def keys(self) -> list[str]:
        return [item.key for item in self._elements]

    def values(self) -> list[str]:
        return [item.value for item in self._elements]

    def items(self) -> list[tuple[str, str]]:
        return [(item.key, item.value) for item in self._elements]

    def popone(self, key: str) -> Entry:
        """Remove and return the first entry for ``key``.

        The map is left untouched when ``KeyNotFoundError`` is raised.
        """
        for idx, item in enumerate(self._elements):
            if item.key == key:
                return self._elements.pop(idx)
        raise KeyNotFoundError(key)

    def update(self, key: str, value: Any):
        """Replace every entry for ``key`` in place with ``(key, value)``.

        Unlike ``get`` and ``popone``, a missing key is not an error and
        leaves the map unchanged.
        """
        ids_for_replace = [
            idx for idx, item in enumerate(self._elements) if item.key == key
        ]

        if not ids_for_replace:
            logger.debug("update of %r matched no entries", key)
            return

        new_item = Entry(key, _to_str(value))
        for idx in ids_for_replace:
            self._elements[idx] = new_item

    def copy(self) -> "MultiDict":
        other = type(self)()
        other._elements = list(self._elements)
        return other

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, key: object) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[str]:
        return (item.key for item in self._elements)

    def __getitem__(self, key: str) -> str:
        return self.get(key).value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MultiDict):
            return self._elements == other._elements
        if isinstance(other, list):
            return self.items() == other
        return False

    def __str__(self) -> str:
        pairs = ", ".join(f'"{k}":"{v}"' for k, v in self._elements)
        return f"{type(self).__name__} < {pairs} >"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.items()!r})"
