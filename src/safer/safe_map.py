"""SafeMap: dict wrappers whose lookups return Option.

Two variants share the same read API:

- ``PersistentMap``: ``set``/``delete``/``clear`` return a new map and leave
  the receiver untouched, so a reference can be shared freely.
- ``MutableMap``: the same operations change the map in place and return it,
  builder style: ``create_mutable_map().set('a', 1).set('b', 2)``.

Both keep insertion order. Every persistent mutation copies the underlying
dict, which costs O(n) per call.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, Self

from safer.option import Nothing, Option, Some

__all__ = [
    'MutableMap',
    'PersistentMap',
    'SafeMap',
    'create_mutable_map',
    'create_persistent_map',
]


class _SafeMapBase[K, V]:
    """Read operations shared by both map variants."""

    __slots__ = ('_data',)

    def __init__(self, initial: Mapping[K, V] | Iterable[tuple[K, V]] | _SafeMapBase[K, V] | None = None) -> None:
        if initial is None:
            self._data: dict[K, V] = {}
        elif isinstance(initial, _SafeMapBase):
            self._data = dict(initial._data)
        else:
            self._data = dict(initial)

    def get(self, key: K) -> Option[V]:
        """Return Some(value) if the key is present, else Nothing.

        A stored ``None`` is returned as ``Some(None)``, so ``get(k).is_some()``
        agrees with ``has(k)``.
        """
        if key in self._data:
            return Some(self._data[key])
        return Nothing

    def has(self, key: K) -> bool:
        """Return True if the key is present."""
        return key in self._data

    def entries(self) -> Iterator[tuple[K, V]]:
        """Iterate over (key, value) pairs in insertion order."""
        return iter(self._data.items())

    def keys(self) -> Iterator[K]:
        """Iterate over keys in insertion order."""
        return iter(self._data.keys())

    def values(self) -> Iterator[V]:
        """Iterate over values in insertion order."""
        return iter(self._data.values())

    def for_each(self, f: Callable[[V, K], Any]) -> Self:
        """Call ``f(value, key)`` for every entry, in insertion order.

        Returns:
            This map, for chaining.
        """
        for key, value in self._data.items():
            f(value, key)
        return self

    def to_dict(self) -> dict[K, V]:
        """Return a shallow copy of the contents as a plain dict."""
        return dict(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._data!r})'


class PersistentMap[K, V](_SafeMapBase[K, V]):
    """A map whose mutations return new instances.

    Examples:
        >>> m1 = create_persistent_map()
        >>> m2 = m1.set('a', 1)
        >>> m1.has('a'), m2.get('a')
        (False, Some(value=1))
    """

    __slots__ = ()

    def set(self, key: K, value: V) -> PersistentMap[K, V]:
        """Return a new map with ``key`` bound to ``value``."""
        data = dict(self._data)
        data[key] = value
        return PersistentMap(data)

    def delete(self, key: K) -> PersistentMap[K, V]:
        """Return a new map without ``key``. Absent keys are ignored."""
        data = dict(self._data)
        data.pop(key, None)
        return PersistentMap(data)

    def clear(self) -> PersistentMap[K, V]:
        """Return a new empty map."""
        return PersistentMap()

    def to_mutable(self) -> MutableMap[K, V]:
        """Return an independent MutableMap with the same contents."""
        return MutableMap(self._data)


class MutableMap[K, V](_SafeMapBase[K, V]):
    """A map whose mutations change it in place and return it.

    There is no internal locking; mutate from one thread of control only.

    Examples:
        >>> m = create_mutable_map()
        >>> m.set('a', 1).set('b', 2) is m
        True
    """

    __slots__ = ()

    def set(self, key: K, value: V) -> Self:
        """Bind ``key`` to ``value`` in place."""
        self._data[key] = value
        return self

    def delete(self, key: K) -> Self:
        """Remove ``key`` in place. Absent keys are ignored."""
        self._data.pop(key, None)
        return self

    def clear(self) -> Self:
        """Remove every entry in place."""
        self._data.clear()
        return self

    def to_persistent(self) -> PersistentMap[K, V]:
        """Snapshot the current contents into a PersistentMap."""
        return PersistentMap(self._data)


type SafeMap[K, V] = PersistentMap[K, V] | MutableMap[K, V]


def create_persistent_map[K, V](
    initial: Mapping[K, V] | Iterable[tuple[K, V]] | SafeMap[K, V] | None = None,
) -> PersistentMap[K, V]:
    """Create a PersistentMap, optionally seeded with a copy of ``initial``."""
    return PersistentMap(initial)


def create_mutable_map[K, V](
    initial: Mapping[K, V] | Iterable[tuple[K, V]] | SafeMap[K, V] | None = None,
) -> MutableMap[K, V]:
    """Create a MutableMap, optionally seeded with a copy of ``initial``."""
    return MutableMap(initial)
