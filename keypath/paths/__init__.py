"""Paths of keys and their matching algorithms."""

from .match import (
    equal,
    has_element,
    has_prefix,
    has_prefix_string,
    match,
    match_prefix,
    match_prefix_string,
)
from .path import Path, Wildcard, append, base, clone, from_string, join, new, parent


__all__ = [
    "Path",
    "Wildcard",
    "append",
    "base",
    "clone",
    "equal",
    "from_string",
    "has_element",
    "has_prefix",
    "has_prefix_string",
    "join",
    "match",
    "match_prefix",
    "match_prefix_string",
    "new",
    "parent",
]
