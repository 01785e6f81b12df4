"""Path construction over sequences of keys."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, final, override

from keypath.keys import Key, wrap


if TYPE_CHECKING:
    from collections.abc import Iterable


class Path(tuple[Key, ...]):
    """Ordered, immutable sequence of keys addressing a node in a tree."""

    __slots__ = ()

    def __new__(cls, elements: Iterable[Key] = ()) -> Path:
        return super().__new__(cls, elements)

    @override
    def __str__(self) -> str:
        return "/" + "/".join(str(element) for element in self)

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


@final
class _WildcardValue:
    """Underlying value of the ``Wildcard`` key; equal only to itself."""

    __slots__ = ()

    @override
    def __repr__(self) -> str:
        return "*"


Wildcard: Key = wrap(_WildcardValue())
"""Key matching any element in ``match``, ``match_prefix`` and ``match_prefix_string``."""


def _copy_elements(elements: Iterable[Any]) -> list[Key]:
    return [wrap(element) for element in elements]


def new(*elements: Any) -> Path:
    """Construct a path; each element is a Key or a value that can be wrapped in one."""
    return Path(_copy_elements(elements))


def append(path: Path, *elements: Any) -> Path:
    """Return a new path extended by ``elements``.

    With no elements the given path itself is returned, not a copy.
    """
    if not elements:
        return path
    return Path([*path, *_copy_elements(elements)])


def join(*paths: Iterable[Any]) -> Path:
    """Concatenate paths, each treated as a subpath of its predecessor.

    Elements are wrapped like those given to ``new``.
    """
    return Path(_copy_elements(element for path in paths for element in path))


def parent(path: Path) -> Path:
    """Return all but the last element; empty for an empty path."""
    return Path(path[:-1])


def base(path: Path) -> Key | None:
    """Return the last element, or None for an empty path."""
    if path:
        return path[-1]
    return None


def clone(path: Path) -> Path:
    return Path(path)


def from_string(text: str) -> Path:
    """Split ``text`` on ``/`` into a path of string keys.

    ``""`` and ``"/"`` both give the empty path. Input without a leading ``/``
    is accepted, but ``str()`` of the result will not reproduce it.
    """
    if text in {"", "/"}:
        return Path()
    text = text.removeprefix("/")
    return Path(wrap(element) for element in text.split("/"))
