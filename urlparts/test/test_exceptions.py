from __future__ import annotations

import pytest

from urlparts import uri
from urlparts.exceptions import SyntaxErrorKind, UrlPartsError, UrlSyntaxError


def test_syntax_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        uri.parse("no scheme here")


@pytest.mark.parametrize(
    "representation,kind,message",
    [
        ("foo", SyntaxErrorKind.NO_SCHEME, "Scheme not found."),
        (".foo", SyntaxErrorKind.DOT_SEGMENT_BEFORE_SCHEME, "Dot-segment preceding"),
        (":foo", SyntaxErrorKind.EMPTY_SCHEME, "Scheme is empty."),
        ("http:///foo", SyntaxErrorKind.EMPTY_AUTHORITY, "Authority is empty."),
        ("http://[::1/", SyntaxErrorKind.UNMATCHED_BRACKET, "Unmatched square bracket"),
    ],
)
def test_syntax_error_kind_and_message(
    representation: str, kind: SyntaxErrorKind, message: str
) -> None:
    with pytest.raises(UrlPartsError) as excinfo:
        uri.parse(representation)

    error = excinfo.value
    assert isinstance(error, UrlSyntaxError)
    assert error.kind is kind
    assert str(error).startswith(message)
    assert kind.message.startswith(message)


def test_syntax_error_without_detail() -> None:
    error = UrlSyntaxError(SyntaxErrorKind.EMPTY_SCHEME)

    assert str(error) == "Scheme is empty."
    assert error.detail is None


def test_syntax_error_with_detail() -> None:
    error = UrlSyntaxError(SyntaxErrorKind.NO_SCHEME, "url: foo")

    assert str(error) == "Scheme not found. url: foo"
    assert error.detail == "url: foo"
