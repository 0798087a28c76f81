"""
Split URLs into their components and resolve relative references against a
base URL, according to RFC 3986.
"""
from __future__ import annotations

from importlib_metadata import version

from urlparts.components import Url, recombine
from urlparts.constants import NO_PORT
from urlparts.exceptions import SyntaxErrorKind, UrlPartsError, UrlSyntaxError
from urlparts.uri import build, merge_paths, parse, remove_dot_segments, resolve

__version__ = version("urlparts")

__all__ = [
    "NO_PORT",
    "SyntaxErrorKind",
    "Url",
    "UrlPartsError",
    "UrlSyntaxError",
    "build",
    "merge_paths",
    "parse",
    "recombine",
    "remove_dot_segments",
    "resolve",
]
