"""Key implementations and the value-to-key dispatch."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, override

from .protocol import MASK64, Hashable, Key


if TYPE_CHECKING:
    from .map import Map


def native_hash(value: Any) -> int:
    """Hash a natively hashable value into the unsigned 64-bit range."""
    return hash(value) & MASK64


class NativeKey(Key):
    """Key over a natively hashable scalar such as a string or number."""

    __slots__ = ("_hash", "_value")

    is_native: ClassVar[bool] = True

    def __init__(self, value: Any) -> None:
        super().__init__()
        try:
            self._hash = native_hash(value)
        except TypeError as exc:
            msg = f"unhashable key type: '{type(value).__name__}'"
            raise TypeError(msg) from exc
        self._value = value

    @property
    @override
    def underlying(self) -> Any:
        return self._value

    @override
    def equal(self, other: object) -> bool:
        return isinstance(other, NativeKey) and self._value == other._value

    @override
    def hash64(self) -> int:
        return self._hash


class HashableKey(Key):
    """Key over a value implementing the ``Hashable`` contract."""

    __slots__ = ("_value",)

    def __init__(self, value: Hashable) -> None:
        super().__init__()
        self._value = value

    @property
    @override
    def underlying(self) -> Any:
        return self._value

    @override
    def equal(self, other: object) -> bool:
        return isinstance(other, HashableKey) and self._value.equal(other.underlying)

    @override
    def hash64(self) -> int:
        return self._value.hash64() & MASK64


class MapKey(HashableKey):
    """Key backed by a nested ``Map``, compared structurally."""

    __slots__ = ()

    def __init__(self, value: Map) -> None:
        super().__init__(value)

    @override
    def __str__(self) -> str:
        return repr(self._value)


def wrap(value: Any) -> Key:
    """Return ``value`` as a Key, choosing its kind once from the value's shape.

    Keys are returned unchanged. ``Map`` instances and other mappings become
    ``MapKey`` over a fresh nested ``Map`` owned by the key, values
    implementing ``Hashable`` become ``HashableKey`` and every other hashable
    value becomes a ``NativeKey``.
    """
    from .map import Map

    if isinstance(value, Key):
        return value
    if isinstance(value, Map):
        return MapKey(Map.from_mapping(value))
    if isinstance(value, Hashable):
        return HashableKey(value)
    if isinstance(value, Mapping):
        return MapKey(Map.from_mapping(value))
    return NativeKey(value)


new = wrap
