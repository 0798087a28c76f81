from __future__ import annotations

import logging
import sys
from typing import List, TextIO, cast

import docopt
from typing_extensions import TypedDict

from urlparts import __version__, uri
from urlparts.components import Url
from urlparts.exceptions import UrlPartsError

# - Assign doc to DOC to keep it if python -OO is used (which strips docstrings)
# - We format spaces into blank lines to work around a bug in docopt-ng's usage
#   parser.
USAGE = """\
usage: urlparts [options] <url> [<reference>...]
       urlparts --help\
"""

__doc__ = DOC = f"""
Split a URL into its RFC 3986 components, optionally resolving relative
references against it.

{USAGE}

options:
    <url>
        An absolute URL (with a scheme) to split into components.
{" "}
    <reference>
        A URI-reference to resolve against <url>. The components of each
        resolved URL are printed after those of <url>.
{" "}
    --resolve-only
        Only print the resolved references, one per line, instead of the
        components of each URL.
{" "}
    --non-strict
        Resolve references with the same scheme as <url> as if they had no
        scheme, e.g. http:g against http://a/b/c is http://a/b/g.
{" "}
    --traceback
        Print the Python traceback on errors.
{" "}
    --debug
        Log details of how references are resolved to stderr.
{" "}
    --version
        Print the version and exit.
{" "}
    --help, -h
        Show this help.
"""

ParsedArgs = TypedDict(
    "ParsedArgs",
    {
        "<url>": str,
        "<reference>": List[str],
        "--resolve-only": bool,
        "--non-strict": bool,
        "--traceback": bool,
        "--debug": bool,
        "--version": bool,
        "--help": bool,
        "-h": bool,
    },
)

COMPONENTS = (
    "scheme",
    "authority",
    "userinfo",
    "host",
    "port",
    "path",
    "query",
    "fragment",
)


def print_components(url: Url, out: TextIO) -> None:
    print("------> {0}".format(url), file=out)
    for name in COMPONENTS:
        value = getattr(url, name)
        print("{0}: {1}".format(name, "" if value is None else value), file=out)


def _main(args: ParsedArgs) -> None:
    if args["--debug"]:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    base = uri.parse(args["<url>"])
    strict = not args["--non-strict"]
    resolved = [uri.resolve(base, ref, strict=strict) for ref in args["<reference>"]]

    if args["--resolve-only"]:
        for url in resolved:
            print(url)
        return

    for url in [base] + resolved:
        print_components(url, sys.stdout)


def main(argv: list[str] | None = None) -> None:
    try:
        args = cast(ParsedArgs, docopt.docopt(DOC, version=__version__, argv=argv))
    except docopt.DocoptExit as e:
        if e.code:
            # docopt-ng's own messages for unknown options are confusing, so
            # print our own.
            print(
                f"""\
urlparts couldn't understand the command line options it received. Run again \
with --help for more info.

{USAGE}
""",
                file=sys.stderr,
                end="",
            )
            raise SystemExit(1) from e
        raise e
    try:
        _main(args)
    except UrlPartsError as e:
        print(f"fatal: {e}", file=sys.stderr)

        if args["--traceback"]:
            import traceback

            print("\n--traceback on, full traceback follows:\n", file=sys.stderr)
            traceback.print_exc()

        sys.exit(1)


if __name__ == "__main__":
    main()
