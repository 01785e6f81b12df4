"""Key and hashable contract definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Protocol, override, runtime_checkable


MASK64 = (1 << 64) - 1


@runtime_checkable
class Hashable(Protocol):
    """Contract for values that supply their own key equality and hash.

    Implementations must keep ``a.equal(b)`` implying ``a.hash64() == b.hash64()``.
    """

    def equal(self, other: Any) -> bool:
        """Return True when ``other`` identifies the same key."""
        ...

    def hash64(self) -> int:
        """Return an unsigned 64-bit hash consistent with ``equal``."""
        ...


class Key(ABC):
    """Uniform wrapper giving any value an equality/hash contract."""

    __slots__ = ()

    is_native: ClassVar[bool] = False

    @property
    @abstractmethod
    def underlying(self) -> Any:
        """Return the wrapped value."""

    @abstractmethod
    def equal(self, other: object) -> bool:
        """Return True when ``other`` is a Key for the same value."""

    @abstractmethod
    def hash64(self) -> int:
        """Return an unsigned 64-bit hash consistent with ``equal``."""

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self.equal(other)

    @override
    def __hash__(self) -> int:
        return self.hash64()

    @override
    def __str__(self) -> str:
        return str(self.underlying)

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.underlying!r})"
