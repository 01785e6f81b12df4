"""Interface for ``python -m keypath``."""

from __future__ import annotations

import logging
from argparse import ArgumentParser
from typing import TYPE_CHECKING

from ._version import version
from .paths import Path, Wildcard, from_string, match, match_prefix, match_prefix_string


if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


__all__ = ["main"]

logger = logging.getLogger(__name__)

_MATCHERS: dict[str, Callable[[Path, Path], bool]] = {
    "exact": match,
    "prefix": match_prefix,
    "string": match_prefix_string,
}


def _pattern(text: str) -> Path:
    """Parse a path, turning ``*`` segments into ``Wildcard``."""
    return Path(Wildcard if element.underlying == "*" else element for element in from_string(text))


def main(args: Sequence[str] | None = None) -> int:
    """Argument parser for the CLI."""
    parser = ArgumentParser(prog="keypath")
    _ = parser.add_argument("-V", "--version", action="version", version=version)
    _ = parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    match_parser = subparsers.add_parser("match", help="test a path against a wildcard pattern")
    _ = match_parser.add_argument("pattern", help="pattern path, '*' segments match anything")
    _ = match_parser.add_argument("path", help="path to test, e.g. /net/iface0")
    _ = match_parser.add_argument("--mode", choices=sorted(_MATCHERS), default="exact")

    namespace = parser.parse_args(args)
    if namespace.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if namespace.command is None:
        parser.print_help()
        return 0

    pattern = _pattern(namespace.pattern)
    path = from_string(namespace.path)
    matched = _MATCHERS[namespace.mode](pattern, path)
    logger.debug("%s match of %s against %s: %s", namespace.mode, path, pattern, matched)
    print("true" if matched else "false")
    return 0 if matched else 1


if __name__ == "__main__":
    raise SystemExit(main())
