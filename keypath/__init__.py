"""keypath - maps keyed by arbitrary values, and hierarchical paths of keys"""

from . import paths
from ._version import version as __version__
from .keys import Hashable, Key, Map, wrap
from .paths import Path, Wildcard


__all__ = [
    "Hashable",
    "Key",
    "Map",
    "Path",
    "Wildcard",
    "__version__",
    "paths",
    "wrap",
]
