"""
The immutable value object holding the components of a parsed URL, and its
recomposition into a string (RFC 3986 section 5.3).
"""
from __future__ import annotations

from dataclasses import dataclass, field

from urlparts.constants import NO_PORT
from urlparts.exceptions import SyntaxErrorKind, UrlSyntaxError

__all__ = ["Url", "recombine"]


@dataclass(frozen=True)
class Url:
    """
    The components of a URL.

    String components which are absent are ``None``, which is distinct from
    being present but empty (e.g. ``http://a/?`` has an empty query). The
    path is always present. A port of :data:`urlparts.constants.NO_PORT`
    means no port was given.

    Two URLs compare equal when all components other than the fragment are
    equal; two references differing only by fragment identify the same
    resource.
    """

    scheme: str | None = None
    authority: str | None = None
    userinfo: str | None = None
    host: str | None = None
    port: int = NO_PORT
    path: str = ""
    query: str | None = None
    fragment: str | None = field(default=None, compare=False)

    @classmethod
    def parse(cls, representation: str) -> Url:
        from urlparts import uri

        return uri.parse(representation)

    def resolve(self, reference: str, strict: bool = True) -> Url:
        """Resolve ``reference`` using this URL as the base URI."""
        from urlparts import uri

        return uri.resolve(self, reference, strict=strict)

    @property
    def has_port(self) -> bool:
        return self.port != NO_PORT

    def geturl(self) -> str:
        return recombine(self)

    def __str__(self) -> str:
        return recombine(self)


def recombine(url: Url) -> str:
    """
    Combine the components of a Url into a URI string.

    Implements section 5.3 Component Recomposition.

    >>> recombine(Url(scheme="http", authority="a", host="a", path="/b"))
    'http://a/b'
    >>> recombine(Url(scheme="news", path="comp.lang.c++", fragment="top"))
    'news:comp.lang.c++#top'
    """
    out = []

    # Refuse to construct a broken URI-reference
    if url.authority and url.path and not url.path.startswith("/"):
        raise UrlSyntaxError(
            SyntaxErrorKind.RELATIVE_PATH_WITH_AUTHORITY, "path: {0}".format(url.path)
        )

    if url.scheme is not None:
        out.append(url.scheme)
        out.append(":")

    if url.authority:
        out.append("//")
        out.append(url.authority)

    out.append(url.path)

    if url.query is not None:
        out.append("?")
        out.append(url.query)

    if url.fragment is not None:
        out.append("#")
        out.append(url.fragment)

    return "".join(out)
