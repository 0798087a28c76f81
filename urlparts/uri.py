"""
This module contains URI parsing and resolution functions, implemented
according to `RFC 3986`_.

.. _RFC 3986: https://tools.ietf.org/html/rfc3986
"""
from __future__ import annotations

import dataclasses
import logging

from urlparts.components import Url
from urlparts.constants import (
    DOT_DOT_SLASH,
    DOT_SLASH,
    NO_PORT,
    SLASH_DOT,
    SLASH_DOT_DOT,
    SLASH_DOT_DOT_SLASH,
    SLASH_DOT_SLASH,
)
from urlparts.exceptions import SyntaxErrorKind, UrlSyntaxError
from urlparts.parser import parse_components

__all__ = ["parse", "build", "resolve", "merge_paths", "remove_dot_segments"]

logger = logging.getLogger(__name__)


def parse(representation: str) -> Url:
    """
    Parse an absolute URL (one with a scheme) into its components.

    >>> url = parse("http://www.bla.com:8080/p/a/t/h?q=y#f")
    >>> url.host, url.port, url.path, url.query, url.fragment
    ('www.bla.com', 8080, '/p/a/t/h', 'q=y', 'f')

    Raises:
        UrlSyntaxError: if ``representation`` has no scheme, an empty
            authority or an unterminated IP-literal host
    """
    return parse_components(representation, relative_resolution=False)


def build(
    scheme: str,
    host: str | None,
    path: str,
    query: str | None = None,
    fragment: str | None = None,
    *,
    port: int = NO_PORT,
) -> Url:
    """
    Create a Url directly from its components.

    The authority is the host, or ``host:port`` if a port is given.

    >>> str(build("http", "example.com", "/a", port=8080))
    'http://example.com:8080/a'
    """
    if not scheme:
        raise UrlSyntaxError(SyntaxErrorKind.EMPTY_SCHEME)

    if port != NO_PORT:
        authority: str | None = "{0}:{1:d}".format(host or "", port)
    else:
        authority = host or None

    if authority and path and not path.startswith("/"):
        raise UrlSyntaxError(
            SyntaxErrorKind.RELATIVE_PATH_WITH_AUTHORITY, "path: {0}".format(path)
        )

    return Url(
        scheme=scheme,
        authority=authority,
        host=(host or "") if authority else None,
        port=port,
        path=path,
        query=query,
        fragment=fragment,
    )


def resolve(base: Url | str, reference: str, strict: bool = True) -> Url:
    """
    Resolve a reference URI against a base URI to form a target URI.

    Implements relative URI resolution according to RFC 3986 section 5.2.
    "Relative Resolution".

    Args:
        base: The absolute base URI. Strings are parsed with :func:`parse`.
        reference: The URI-reference to resolve. If empty, a copy of base is
            returned.
        strict: If False, a reference with the same scheme as the base is
            resolved as if it had no scheme (the backwards compatible
            behaviour allowed by section 5.2.2).

    >>> str(resolve("http://a/b/c/d;p?q", "../g"))
    'http://a/b/g'

    Raises:
        UrlSyntaxError: if base or reference can't be parsed
    """
    if isinstance(base, str):
        base = parse(base)

    if not reference:
        return dataclasses.replace(base)

    ref = parse_components(reference, relative_resolution=True)

    if not strict and ref.scheme == base.scheme:
        ref = dataclasses.replace(ref, scheme=None)

    if ref.scheme is not None:
        logger.debug("Reference %r has a scheme, ignoring base", reference)
        return dataclasses.replace(ref, path=remove_dot_segments(ref.path))

    if ref.authority is not None:
        logger.debug("Reference %r has an authority", reference)
        return dataclasses.replace(
            ref, scheme=base.scheme, path=remove_dot_segments(ref.path)
        )

    if ref.path == "":
        logger.debug("Reference %r has no path, inheriting base path", reference)
        path = base.path
        query = base.query if ref.query is None else ref.query
    else:
        if ref.path.startswith("/"):
            path = remove_dot_segments(ref.path)
        else:
            logger.debug("Merging %r with base path %r", ref.path, base.path)
            path = remove_dot_segments(merge_paths(base, ref.path))
        query = ref.query

    return Url(
        scheme=base.scheme,
        authority=base.authority,
        userinfo=base.userinfo,
        host=base.host,
        port=base.port,
        path=path,
        query=query,
        fragment=ref.fragment,
    )


def merge_paths(base: Url, ref_path: str) -> str:
    """
    Resolve ref_path against the base path.

    Implements 5.2.3. Merge Paths.

    >>> merge_paths(parse("http://a/b/c/d;p?q"), "g")
    '/b/c/g'
    >>> merge_paths(parse("x://blah"), "rel/path")
    '/rel/path'
    """
    if base.authority and not base.path:
        assert not ref_path.startswith("/")
        return "/" + ref_path

    slash = base.path.rfind("/")
    if slash == -1:
        return ref_path
    return base.path[: slash + 1] + ref_path


def _remove_last_segment(output: list[str]) -> None:
    # Each output entry after the first begins with a /, so dropping the last
    # entry removes the last segment and its preceding /. Nothing remains to
    # remove above the root.
    if output:
        output.pop()


def remove_dot_segments(path: str) -> str:
    """
    Remove . and .. segments from path.

    Implements 5.2.4. Remove Dot Segments.

    >>> remove_dot_segments("/a/b/c/./../../g")
    '/a/g'
    >>> remove_dot_segments("mid/content=5/../6")
    'mid/6'
    """
    pos = 0
    end = len(path)
    output: list[str] = []

    while pos < end:
        # A
        if path.startswith(DOT_SLASH, pos):
            pos += 2
        elif path.startswith(DOT_DOT_SLASH, pos):
            pos += 3
        # C
        elif path.startswith(SLASH_DOT_DOT_SLASH, pos):
            _remove_last_segment(output)
            # The trailing / starts the next segment
            pos += 3
        elif path.endswith(SLASH_DOT_DOT) and pos == end - 3:
            _remove_last_segment(output)
            output.append("/")
            pos = end
        # B
        elif path.startswith(SLASH_DOT_SLASH, pos):
            pos += 2
        elif path.endswith(SLASH_DOT) and pos == end - 2:
            output.append("/")
            pos = end
        # D
        elif path[pos:] in ("..", "."):
            pos = end
        # E
        else:
            slash = path.find("/", pos + 1)
            if slash == -1:
                slash = end
            output.append(path[pos:slash])
            pos = slash

    return "".join(output)
