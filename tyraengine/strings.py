"""Small string helpers used when building asset paths."""

from __future__ import annotations

_DIGITS = 6


def with_leading_zeros(text: str) -> str:
    """Pad ``text`` to six characters with zeros, keeping its last six."""
    return ("00000000" + text)[-_DIGITS:]


def without_extension(source: str) -> str:
    """Return ``source`` up to its first dot."""
    index = source.find(".")
    if index < 0:
        raise ValueError(f"name has no extension: {source!r}")
    return source[:index]