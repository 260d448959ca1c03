"""Path segments and JSON Pointer (RFC 6901) rendering.

A path segment is a plain ``str`` (object key) or ``int`` (array index).
A path is a tuple of segments from the root to a node; the root is ``()``.

Example::

    to_json_pointer(("bar", "thud", "a/b", 2, "m~n"))
    # "/bar/thud/a~1b/2/m~0n"
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["Path", "PathSegment", "parse_json_pointer", "to_json_pointer"]

PathSegment = str | int
Path = tuple[PathSegment, ...]


def _escape(segment: PathSegment) -> str:
    # "~" must be escaped first so the "~1" we produce is not re-escaped.
    return str(segment).replace("~", "~0").replace("/", "~1")


def _unescape(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")


def to_json_pointer(path: Sequence[PathSegment]) -> str:
    """Render a path as a JSON Pointer string ("" for the root)."""
    return "".join(f"/{_escape(segment)}" for segment in path)


def parse_json_pointer(pointer: str) -> tuple[str, ...]:
    """Split a JSON Pointer string into unescaped string segments.

    Array indices come back as strings: a pointer does not record whether a
    token addressed an object key or an array element.

    Raises:
        ValueError: If ``pointer`` is non-empty and does not start with "/".
    """
    if pointer == "":
        return ()
    if not pointer.startswith("/"):
        msg = f"JSON Pointer must be empty or start with '/', got {pointer!r}"
        raise ValueError(msg)
    return tuple(_unescape(token) for token in pointer[1:].split("/"))
