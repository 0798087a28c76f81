from __future__ import annotations

from enum import Enum


class SyntaxErrorKind(str, Enum):
    """The ways in which a URL can be structurally malformed."""

    NO_SCHEME = "Scheme not found."
    DOT_SEGMENT_BEFORE_SCHEME = "Dot-segment preceding a scheme?"
    EMPTY_SCHEME = "Scheme is empty."
    EMPTY_AUTHORITY = "Authority is empty."
    UNMATCHED_BRACKET = "Unmatched square bracket in IP-literal."
    RELATIVE_PATH_WITH_AUTHORITY = (
        "With an authority present the path must be absolute or empty."
    )

    @property
    def message(self) -> str:
        return self.value


class UrlPartsError(Exception):
    pass


class UrlSyntaxError(UrlPartsError, ValueError):
    """
    Raised when a string can't be split into URL components.

    Attributes:
        kind: The :class:`SyntaxErrorKind` describing what was wrong
        detail: Optional extra context, such as the offending input
    """

    kind: SyntaxErrorKind
    detail: str | None

    def __init__(self, kind: SyntaxErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        if detail is None:
            super().__init__(kind.message)
        else:
            super().__init__("{0} {1}".format(kind.message, detail))
