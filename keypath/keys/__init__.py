"""Keys and the hybrid map built on them."""

from .key import HashableKey, MapKey, NativeKey, new, wrap
from .map import Map
from .protocol import Hashable, Key


__all__ = ["Hashable", "HashableKey", "Key", "Map", "MapKey", "NativeKey", "new", "wrap"]
