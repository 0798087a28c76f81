"""
Splits URL strings into their components.

The parsing is structural: only the delimiters separating the components are
recognised, the characters within components aren't validated against the
RFC 3986 grammar.
"""
from __future__ import annotations

import re
from typing import NamedTuple, Sequence

from typing_extensions import Final

from urlparts.components import Url
from urlparts.constants import AUTHORITY_MARKER, AUTHORITY_TERMINATORS, NO_PORT
from urlparts.exceptions import SyntaxErrorKind, UrlSyntaxError

__all__ = [
    "Authority",
    "END",
    "extract_scheme",
    "extract_authority",
    "split_authority",
    "split_tail",
    "parse_port",
    "parse_components",
]

# Position returned by extract_authority() when the authority runs to the end
# of the string, leaving no path, query or fragment to split.
END: Final = None

_LEADING_DIGITS: Final = re.compile(r"[0-9]*")


class Authority(NamedTuple):
    authority: str
    userinfo: str | None
    host: str
    port: int


def _syntax_error(kind: SyntaxErrorKind, representation: str) -> UrlSyntaxError:
    return UrlSyntaxError(kind, "url: {0}".format(representation))


def extract_scheme(
    representation: str, relative_resolution: bool
) -> tuple[str | None, int]:
    """
    Find the scheme at the start of ``representation``.

    Args:
        representation: The URL string
        relative_resolution: True if ``representation`` is a reference which
            will be resolved against a base URL, and so needn't have a scheme
    Returns:
        The scheme (or None) and the position just after its ``:``
    Raises:
        UrlSyntaxError: if a scheme is required but missing, or is empty
    """
    # The first segment of a relative path may contain a colon, but only if a
    # dot-segment precedes it (RFC 3986 section 4.2), so it's not mistaken for
    # a scheme.
    if representation.startswith("."):
        if not relative_resolution:
            raise _syntax_error(
                SyntaxErrorKind.DOT_SEGMENT_BEFORE_SCHEME, representation
            )
        return None, 0

    # A colon after the start of the path, query or fragment isn't a scheme
    # delimiter, e.g. //host:80/ or /a:b
    colon = representation.find(":")
    delimiter = _find_first(representation, AUTHORITY_TERMINATORS, 0)
    if delimiter is not None and delimiter < colon:
        colon = -1

    if colon == -1:
        if not relative_resolution:
            raise _syntax_error(SyntaxErrorKind.NO_SCHEME, representation)
        return None, 0

    if colon == 0:
        raise _syntax_error(SyntaxErrorKind.EMPTY_SCHEME, representation)
    return representation[:colon], colon + 1


def _find_first(text: str, chars: Sequence[str], start: int) -> int | None:
    found = [i for i in (text.find(c, start) for c in chars) if i != -1]
    return min(found) if found else None


def extract_authority(
    representation: str, pos: int
) -> tuple[Authority | None, int | None]:
    """
    Extract the authority starting at ``pos``, if there is one.

    Returns:
        The split authority (or None if ``pos`` isn't at a ``//``) and the
        position the authority ends at. The position is :data:`END` if the
        authority extends to the end of the string.
    """
    # URLs like mailto:John.Doe@example.com or news:comp.lang.c++ don't have
    # an authority.
    if not representation.startswith(AUTHORITY_MARKER, pos):
        return None, pos

    start = pos + len(AUTHORITY_MARKER)
    end = _find_first(representation, AUTHORITY_TERMINATORS, start)
    authority = representation[start:end]

    if not authority:
        raise _syntax_error(SyntaxErrorKind.EMPTY_AUTHORITY, representation)

    return split_authority(authority), end


def split_authority(authority: str) -> Authority:
    """
    Split an authority into userinfo, host and port.

    >>> split_authority("bob@[::1]:8080")
    Authority(authority='bob@[::1]:8080', userinfo='bob', host='[::1]', port=8080)
    """
    at = authority.find("@")
    userinfo = authority[:at] if at != -1 else None
    host_start = at + 1

    # An IP-literal host (usually IPv6) contains colons itself, so the port
    # can only follow the closing bracket.
    if authority.startswith("[", host_start):
        bracket = authority.find("]", host_start)
        if bracket == -1:
            raise UrlSyntaxError(
                SyntaxErrorKind.UNMATCHED_BRACKET, "authority: {0}".format(authority)
            )
        colon = authority.find(":", bracket)
    else:
        colon = authority.find(":", host_start)

    if colon == -1:
        return Authority(authority, userinfo, authority[host_start:], NO_PORT)

    return Authority(
        authority,
        userinfo,
        authority[host_start:colon],
        parse_port(authority[colon + 1 :]),
    )


def parse_port(text: str) -> int:
    """
    Convert the text following the port's ``:`` to an int.

    The conversion is lenient: the leading digits are used and anything after
    them is ignored. Text without leading digits is port 0.

    >>> parse_port("8080")
    8080
    >>> parse_port("80abc")
    80
    >>> parse_port("")
    0
    """
    digits = _LEADING_DIGITS.match(text).group()  # type: ignore[union-attr]
    return int(digits) if digits else 0


def split_tail(
    representation: str, pos: int
) -> tuple[str, str | None, str | None]:
    """
    Split the remainder of a URL from ``pos`` into path, query and fragment.

    The initial ``/`` of a path is part of the path.

    >>> split_tail("http://a/b/c?x=1#top", 8)
    ('/b/c', 'x=1', 'top')
    >>> split_tail("news:comp.lang.c++", 5)
    ('comp.lang.c++', None, None)
    """
    hash_pos = representation.find("#", pos)
    tail_end = len(representation) if hash_pos == -1 else hash_pos

    # A ? after the # is part of the fragment
    question_pos = representation.find("?", pos, tail_end)

    if question_pos == -1:
        path = representation[pos:tail_end]
        query = None
    else:
        path = representation[pos:question_pos]
        query = representation[question_pos + 1 : tail_end]

    fragment = representation[hash_pos + 1 :] if hash_pos != -1 else None

    return path, query, fragment


def parse_components(representation: str, relative_resolution: bool = False) -> Url:
    """
    Split ``representation`` into a :class:`Url`.

    Args:
        representation: The URL string
        relative_resolution: If True, ``representation`` is parsed as a
            reference to be resolved against a base, and so may lack a scheme
    Raises:
        UrlSyntaxError: if ``representation`` is structurally invalid
    """
    scheme, pos = extract_scheme(representation, relative_resolution)
    authority, end = extract_authority(representation, pos)

    # end is END: the authority exists, but there's no path, query or fragment
    if end is None:
        path, query, fragment = "", None, None
    else:
        path, query, fragment = split_tail(representation, end)

    return Url(
        scheme=scheme,
        **({} if authority is None else authority._asdict()),
        path=path,
        query=query,
        fragment=fragment,
    )
