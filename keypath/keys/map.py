"""Hybrid map accepting both natively hashable keys and custom ``Hashable`` keys."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any, override

from .key import native_hash, wrap
from .protocol import MASK64, Hashable, Key


logger = logging.getLogger(__name__)

Visitor = Callable[[Any, Any], BaseException | None]

_MIX = 0x9E3779B97F4A7C15


@dataclass(slots=True)
class _Entry:
    key: Key
    value: Any


def _as_map(value: Mapping[Any, Any]) -> Map:
    if isinstance(value, Map):
        return value
    return Map.from_mapping(value)


def _values_equal(left: Any, right: Any) -> bool:
    """Compare stored values, structurally when either side is a mapping."""
    left_is_mapping = isinstance(left, Mapping)
    right_is_mapping = isinstance(right, Mapping)
    if left_is_mapping or right_is_mapping:
        return left_is_mapping and right_is_mapping and _as_map(left).equal(_as_map(right))
    if isinstance(left, Hashable):
        return left.equal(right)
    return bool(left == right)


def _value_hash(value: Any) -> int:
    if isinstance(value, Mapping):
        return _as_map(value).hash64()
    if isinstance(value, Hashable):
        return value.hash64() & MASK64
    try:
        return native_hash(value)
    except TypeError:
        # unhashable values (lists, sets) still compare with ``==``
        return 0


def _entry_hash(key_hash: int, value: Any) -> int:
    return ((key_hash * _MIX) ^ _value_hash(value)) & MASK64


class Map(MutableMapping[Any, Any]):
    """Key-value map whose keys may be dictionaries or custom ``Hashable`` objects.

    Natively hashable keys live in a plain ``dict``. Every other key is placed in
    a bucket selected by its ``hash64()``; keys sharing a bucket form a chain kept
    in insertion order and told apart with ``equal``.

    The map is not synchronized. Callers sharing one across threads must
    serialize access themselves.
    """

    def __init__(self, data: Mapping[Any, Any] | Iterable[tuple[Any, Any]] | None = None, /, **kwargs: Any) -> None:
        super().__init__()
        self._native: dict[Any, Any] = {}
        self._custom: dict[int, list[_Entry]] = {}
        self._length = 0
        if data is not None:
            self.update(data)
        if kwargs:
            self.update(kwargs)

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> Map:
        """Build a map from ``mapping``, converting nested mappings into maps."""
        result = cls()
        for key, value in mapping.items():
            if isinstance(value, Mapping):
                value = cls.from_mapping(value)
            result.set(key, value)
        return result

    def _find(self, key: Key) -> tuple[int, list[_Entry] | None, int]:
        key_hash = key.hash64()
        chain = self._custom.get(key_hash)
        if chain is not None:
            for index, entry in enumerate(chain):
                if entry.key.equal(key):
                    return key_hash, chain, index
        return key_hash, chain, -1

    def set(self, key: Any, value: Any) -> None:
        """Insert ``value`` under ``key``, overwriting any existing value in place."""
        key = wrap(key)
        if key.is_native:
            if key.underlying not in self._native:
                self._length += 1
            self._native[key.underlying] = value
            return

        key_hash, chain, index = self._find(key)
        if chain is None:
            self._custom[key_hash] = [_Entry(key, value)]
        elif index >= 0:
            chain[index].value = value
            return
        else:
            chain.append(_Entry(key, value))
            logger.debug("hash collision on %#018x, chain length %d", key_hash, len(chain))
        self._length += 1

    def lookup(self, key: Any) -> tuple[Any, bool]:
        """Return ``(value, True)`` for a stored key, or ``(None, False)``."""
        key = wrap(key)
        if key.is_native:
            if key.underlying in self._native:
                return self._native[key.underlying], True
            return None, False

        _, chain, index = self._find(key)
        if chain is None or index < 0:
            return None, False
        return chain[index].value, True

    def _remove(self, key: Any) -> bool:
        key = wrap(key)
        if key.is_native:
            if key.underlying not in self._native:
                return False
            del self._native[key.underlying]
            self._length -= 1
            return True

        key_hash, chain, index = self._find(key)
        if chain is None or index < 0:
            return False
        del chain[index]
        if not chain:
            del self._custom[key_hash]
            logger.debug("removed empty chain %#018x", key_hash)
        self._length -= 1
        return True

    def delete(self, key: Any) -> None:
        """Remove ``key`` if present; absent keys are ignored."""
        _ = self._remove(key)

    def iterate(self, visit: Visitor) -> BaseException | None:
        """Call ``visit(key, value)`` for every entry.

        Native keys are visited first, then each chain from head to tail. The
        first non-None value returned by ``visit`` stops the walk and is returned
        as is; exceptions raised by ``visit`` propagate unchanged.
        """
        visited = 0
        for native_key, value in self._native.items():
            error = visit(native_key, value)
            if error is not None:
                logger.debug("iteration stopped by visitor after %d entries", visited)
                return error
            visited += 1
        for chain in self._custom.values():
            for entry in chain:
                error = visit(entry.key.underlying, entry.value)
                if error is not None:
                    logger.debug("iteration stopped by visitor after %d entries", visited)
                    return error
                visited += 1
        return None

    def equal(self, other: Any) -> bool:
        """Return True when ``other`` holds equal keys mapped to structurally equal values."""
        if not isinstance(other, Mapping):
            return False
        other = _as_map(other)
        if self is other:
            return True
        if self._length != other._length:
            return False

        for native_key, value in self._native.items():
            if native_key not in other._native:
                return False
            if not _values_equal(value, other._native[native_key]):
                return False

        for chain in self._custom.values():
            for entry in chain:
                _, other_chain, index = other._find(entry.key)
                if other_chain is None or index < 0:
                    return False
                if not _values_equal(entry.value, other_chain[index].value):
                    return False
        return True

    def hash64(self) -> int:
        """Return an insertion-order independent hash of all entries."""
        result = 0
        for native_key, value in self._native.items():
            result ^= _entry_hash(native_hash(native_key), value)
        for chain in self._custom.values():
            for entry in chain:
                result ^= _entry_hash(entry.key.hash64(), entry.value)
        return result

    @override
    def __getitem__(self, key: Any) -> Any:
        value, found = self.lookup(key)
        if not found:
            raise KeyError(key)
        return value

    @override
    def __setitem__(self, key: Any, value: Any) -> None:
        self.set(key, value)

    @override
    def __delitem__(self, key: Any) -> None:
        if not self._remove(key):
            raise KeyError(key)

    @override
    def __contains__(self, key: object) -> bool:
        _, found = self.lookup(key)
        return found

    @override
    def __iter__(self) -> Iterator[Any]:
        """Iterate the underlying value of every key, native keys first."""
        yield from self._native
        for chain in self._custom.values():
            for entry in chain:
                yield entry.key.underlying

    @override
    def __len__(self) -> int:
        return self._length

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.equal(other)

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> Map:
        """Return a shallow copy; stored values are shared, chains are not."""
        duplicate = type(self)()
        duplicate._native = dict(self._native)
        duplicate._custom = {
            key_hash: [_Entry(entry.key, entry.value) for entry in chain] for key_hash, chain in self._custom.items()
        }
        duplicate._length = self._length
        return duplicate

    def __or__(self, other: object) -> Map:
        if not isinstance(other, Mapping):
            return NotImplemented
        merged = self.copy()
        merged.update(other)
        return merged

    def __ior__(self, other: Any) -> Map:
        self.update(other)
        return self

    @override
    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"{type(self).__name__}({{{body}}})"
