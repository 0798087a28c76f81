from __future__ import annotations

from typing_extensions import Final

# Port value of a URL which doesn't specify one. Distinct from port 0.
NO_PORT: Final = -1

AUTHORITY_MARKER: Final = "//"
AUTHORITY_TERMINATORS: Final = ("/", "?", "#")

# Segment markers matched by remove_dot_segments(), RFC 3986 section 5.2.4
DOT_SLASH: Final = "./"
DOT_DOT_SLASH: Final = "../"
SLASH_DOT_SLASH: Final = "/./"
SLASH_DOT_DOT_SLASH: Final = "/../"
SLASH_DOT: Final = "/."
SLASH_DOT_DOT: Final = "/.."
