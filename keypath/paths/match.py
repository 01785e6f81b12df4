"""Exact, prefix, wildcard and string-prefix matching between paths.

In every function ``a`` is the path being tested and ``b`` the path (or
prefix) it is tested against. Wildcards are only honoured in ``a``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from keypath.keys import wrap

from .path import Wildcard, base, parent


if TYPE_CHECKING:
    from keypath.keys import Key

    from .path import Path


def _has_prefix(a: Path, b: Path) -> bool:
    return all(b[index].equal(a[index]) for index in range(len(b)))


def _match_prefix(a: Path, b: Path) -> bool:
    return all(a[index].equal(Wildcard) or b[index].equal(a[index]) for index in range(len(b)))


def _compare_element_string(a: Key, b: Key) -> bool:
    a_value, b_value = a.underlying, b.underlying
    if isinstance(a_value, str) and isinstance(b_value, str):
        return a_value.startswith(b_value)
    return b.equal(a)


def equal(a: Path, b: Path) -> bool:
    """Return True when both paths have the same length and equal elements."""
    return len(a) == len(b) and _has_prefix(a, b)


def has_element(a: Path, b: Any) -> bool:
    """Return True when ``b``, a Key or a value that can be wrapped in one, is an element of ``a``."""
    key = wrap(b)
    return any(element.equal(key) for element in a)


def has_prefix(a: Path, b: Path) -> bool:
    """Return True when ``b`` is a prefix of ``a``."""
    return len(a) >= len(b) and _has_prefix(a, b)


def has_prefix_string(a: Path, b: Path) -> bool:
    """Return True when ``b`` is a prefix of ``a``, the last element of ``b`` matching as a string prefix.

    All but the last element of ``b`` must match exactly. The last one matches
    when the element of ``a`` at that position starts with it (both strings),
    or is equal to it otherwise.
    """
    if len(a) < len(b):
        return False
    if not b:
        return True
    if not _has_prefix(parent(a), parent(b)):
        return False
    # a may be longer than b
    return _compare_element_string(a[len(b) - 1], b[-1])


def match(a: Path, b: Path) -> bool:
    """Like ``equal``, but a ``Wildcard`` in ``a`` matches any element of ``b``."""
    return len(a) == len(b) and _match_prefix(a, b)


def match_prefix(a: Path, b: Path) -> bool:
    """Like ``has_prefix``, but a ``Wildcard`` in ``a`` matches any element of ``b``."""
    return len(a) >= len(b) and _match_prefix(a, b)


def match_prefix_string(a: Path, b: Path) -> bool:
    """Combine ``match_prefix`` with the string-prefix rule of ``has_prefix_string``."""
    if len(a) < len(b):
        return False
    if not b:
        return True
    if not _match_prefix(parent(a), parent(b)):
        return False
    last = base(b)
    element = a[len(b) - 1]
    return element.equal(Wildcard) or (last is not None and _compare_element_string(element, last))
