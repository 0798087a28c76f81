from __future__ import annotations

import re

import pytest

from urlparts import __version__
from urlparts.cmdline import main as urlparts_main


def test_cmdline_prints_components(capsys: pytest.CaptureFixture[str]) -> None:
    urlparts_main(argv=["http://www.bla.com:8080/p/a/t/h?q=y#f"])

    out, _ = capsys.readouterr()
    assert out == (
        "------> http://www.bla.com:8080/p/a/t/h?q=y#f\n"
        "scheme: http\n"
        "authority: www.bla.com:8080\n"
        "userinfo: \n"
        "host: www.bla.com\n"
        "port: 8080\n"
        "path: /p/a/t/h\n"
        "query: q=y\n"
        "fragment: f\n"
    )


def test_cmdline_prints_resolved_components(
    capsys: pytest.CaptureFixture[str],
) -> None:
    urlparts_main(argv=["http://www.bla.com:8080/p/a/t/h?q=y#f", "../w/"])

    out, _ = capsys.readouterr()
    resolved = out[out.index("------> http://www.bla.com:8080/p/a/w/") :]
    assert resolved.splitlines() == [
        "------> http://www.bla.com:8080/p/a/w/",
        "scheme: http",
        "authority: www.bla.com:8080",
        "userinfo: ",
        "host: www.bla.com",
        "port: 8080",
        "path: /p/a/w/",
        "query: ",
        "fragment: ",
    ]


def test_cmdline_prints_absent_port(capsys: pytest.CaptureFixture[str]) -> None:
    urlparts_main(argv=["news:comp.lang.c++"])

    out, _ = capsys.readouterr()
    assert "port: -1\n" in out
    assert "path: comp.lang.c++\n" in out


@pytest.mark.parametrize(
    "args,expected",
    [
        (["../g", "g?y#s", "//g"], "http://a/b/g\nhttp://a/b/c/g?y#s\nhttp://g\n"),
        (["http:g"], "http:g\n"),
        (["--non-strict", "http:g"], "http://a/b/c/g\n"),
    ],
)
def test_cmdline_resolve_only(
    args: list[str], expected: str, capsys: pytest.CaptureFixture[str]
) -> None:
    urlparts_main(argv=["--resolve-only", "http://a/b/c/d;p?q"] + args)

    out, _ = capsys.readouterr()
    assert out == expected


@pytest.mark.parametrize(
    "argv,message",
    [
        (["foo"], "fatal: Scheme not found. url: foo"),
        (["http://a/", "//[::1"], "fatal: Unmatched square bracket in IP-literal."),
    ],
)
def test_cmdline_reports_syntax_errors(
    argv: list[str], message: str, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        urlparts_main(argv=argv)

    assert excinfo.value.code == 1
    _, err = capsys.readouterr()
    assert err.startswith(message)
    assert "Traceback" not in err


def test_cmdline_traceback_produces_traceback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    with pytest.raises(SystemExit):
        urlparts_main(argv=["--traceback", "http://"])

    _, err = capsys.readouterr()
    assert "--traceback on, full traceback follows" in err
    assert re.search(r"UrlSyntaxError: Authority is empty\.", err)


def test_cmdline_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        urlparts_main(argv=["--version"])

    out, _ = capsys.readouterr()
    assert out.strip() == __version__


def test_cmdline_prints_usage_error_when_cli_arguments_are_wrong(
    capsys: pytest.CaptureFixture[str],
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        urlparts_main(argv=["--frob"])

    assert excinfo.value.code == 1
    _, err = capsys.readouterr()
    assert re.search(
        "urlparts couldn't understand the command line options it received", err
    )
    assert re.search("^usage: urlparts", err, re.MULTILINE)
    assert re.search("urlparts --help", err)
