"""Media path resolution for paths coming from chat messages and tool output."""

from __future__ import annotations

import os
from urllib.parse import unquote

FILE_URI_PREFIX = "file:///"


def resolve_media_path(raw_path: str) -> str:
    """Resolve a ``file:///`` URI or ``~`` shorthand to a plain local path.

    Only URIs with an empty host (three slashes) are decoded;
    ``file://host/path`` is returned unchanged. The leading ``~`` is replaced
    with ``$HOME`` (empty if unset). The path is not checked for existence.

    Example:
        >>> resolve_media_path("file:///Users/x/a%20b.png")
        '/Users/x/a b.png'
    """
    resolved = raw_path

    if resolved.startswith(FILE_URI_PREFIX):
        resolved = unquote(resolved[len("file://"):])

    if resolved.startswith("~"):
        resolved = os.environ.get("HOME", "") + resolved[1:]

    return resolved
