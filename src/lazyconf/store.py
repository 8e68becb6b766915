"""Nested key-value store with dot-path access."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable

from lazyconf.errors import InvalidArgumentError

__all__ = ["Store", "get_data", "has_data", "set_data", "value_of"]

MISSING: Any = object()


def value_of(default: Any) -> Any:
    """Return ``default``, calling it first when it is a zero-argument producer."""
    return default() if callable(default) else default


def get_data(data: dict[str, Any], key: str, default: Any = None) -> Any:
    """Get an item from a nested dict using dot notation.

    A literal key containing dots takes precedence over traversal. The
    default is returned as-is; callers decide whether to compute it.
    """
    if not key:
        return data

    if key in data:
        return data[key]

    if "." not in key:
        return default

    current: Any = data
    for segment in key.split("."):
        if isinstance(current, Mapping) and segment in current:
            current = current[segment]
        else:
            return default
    return current


def has_data(data: dict[str, Any], keys: Iterable[str]) -> bool:
    """Check that every key exists in a nested dict using dot notation."""
    keys = list(keys)
    if not data or not keys:
        return False

    for key in keys:
        if key in data:
            continue

        current: Any = data
        for segment in key.split("."):
            if isinstance(current, Mapping) and segment in current:
                current = current[segment]
            else:
                return False
    return True


def set_data(data: dict[str, Any], key: str, value: Any) -> None:
    """Set a nested dict item using dot notation, creating levels as needed.

    Any intermediate segment holding a non-dict value is replaced by an
    empty dict.
    """
    *parents, last = key.split(".")
    current = data
    for segment in parents:
        if not isinstance(current.get(segment), dict):
            current[segment] = {}
        current = current[segment]
    current[last] = value


class Store:
    """In-memory configuration tree with dot-path get/set/has/remove.

    The tree is a plain dict and keeps insertion order. ``all()`` hands out
    the live tree, so callers mutating it mutate the store.

    A value stored as ``None`` reads back as ``default`` from :meth:`get`,
    exactly like a missing key. Use :meth:`has` to tell the two apart.

    Example:
        >>> store = Store()
        >>> store.set("database.mysql.host", "localhost")
        >>> store.get("database.mysql.host")
        'localhost'
        >>> store.has("database.mysql", "database.redis")
        False
    """

    def __init__(self, items: dict[str, Any] | None = None) -> None:
        self._items: dict[str, Any] = items if items is not None else {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)})"

    def has(self, *keys: str | list[str] | tuple[str, ...]) -> bool:
        """Return True only if every given key resolves to an existing entry.

        Accepts ``has("a")``, ``has("a", "b.c")`` or ``has(["a", "b.c"])``.
        """
        if len(keys) == 1 and isinstance(keys[0], (list, tuple)):
            keys = tuple(keys[0])
        for key in keys:
            _check_key(key)
        return has_data(self._items, keys)  # type: ignore[arg-type]

    def get(self, key: Any, default: Any = None) -> Any:
        """Get a value by dot-path key.

        A list, tuple or mapping of keys is delegated to :meth:`get_many`.
        ``default`` may be a zero-argument callable, invoked only on a miss.

        Raises:
            InvalidArgumentError: If a key is not a string.
        """
        if _is_key_collection(key):
            return self.get_many(key)
        _check_key(key)
        value = self._lookup(key)
        if value is MISSING or value is None:
            return value_of(default)
        return value

    def _lookup(self, key: str) -> Any:
        return get_data(self._items, key, MISSING)

    def get_many(self, keys: Mapping[str, Any] | Iterable[str]) -> dict[str, Any]:
        """Get several values at once, keeping the order of ``keys``.

        ``keys`` is either a sequence of keys (each defaulting to None) or a
        mapping of key to per-key default.
        """
        if isinstance(keys, Mapping):
            pairs = list(keys.items())
        else:
            pairs = [(key, None) for key in keys]
        return {key: self.get(key, default) for key, default in pairs}

    def set(self, key: str | Mapping[str, Any], value: Any = MISSING) -> None:
        """Set one dot-path key, or every key of a mapping.

        Raises:
            InvalidArgumentError: If a mapping is combined with a value, or a
                key is empty or not a string.
        """
        if isinstance(key, Mapping):
            if value is not MISSING:
                raise InvalidArgumentError("set() takes either a mapping or a key and a value, not both")
            pairs = list(key.items())
        else:
            pairs = [(key, None if value is MISSING else value)]

        for path, item in pairs:
            _check_key(path)
            if not path:
                raise InvalidArgumentError("Config key must not be empty")
            set_data(self._items, path, item)

    def all(self) -> dict[str, Any]:
        """Return the whole configuration tree (the live dict, not a copy)."""
        return self._items

    def remove(self, keys: str | Iterable[str]) -> Store:
        """Remove one or more top-level entries. Nested dot-paths are not traversed."""
        if isinstance(keys, str):
            keys = [keys]
        for key in keys:
            self._items.pop(key, None)
        return self


def _check_key(key: Any) -> None:
    if not isinstance(key, str):
        raise InvalidArgumentError(f"Config keys must be strings, got {type(key).__name__}")


def _is_key_collection(key: Any) -> bool:
    return isinstance(key, (list, tuple, Mapping))
