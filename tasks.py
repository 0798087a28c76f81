from __future__ import annotations

import glob
from os import path
from shlex import quote as shlex_quote

from invoke import task

ROOT = path.relpath(path.dirname(__file__))


def _pytest_args() -> list[str]:
    # The doctests in modules are supplemental examples, not the real tests.
    return ["--doctest-modules", "--pyargs", "urlparts"]


@task
def test(ctx, combine_coverage=False):
    """Run urlparts test suite"""
    cov_args = ["--parallel-mode"] if combine_coverage is True else []
    ctx.run(cmd(["coverage", "run"] + cov_args + ["-m", "pytest"] + _pytest_args()))

    if not combine_coverage:
        _report_coverage(ctx)


def _report_coverage(ctx):
    ctx.run("coverage report")


@task
def pep8(ctx):
    """Lint code for PEP 8 violations"""
    ctx.run("flake8 --version")
    ctx.run("flake8 --max-line-length 88 setup.py tasks.py urlparts")


@task
def readme(ctx):
    """Lint the README for reStructuredText syntax issues"""
    ctx.run("restructuredtext-lint README.rst")


@task
def build_dists(ctx):
    """Build distribution packages"""
    ctx.run("python setup.py sdist", pty=True)
    ctx.run("python setup.py bdist_wheel", pty=True)


@task
def test_dist(ctx, dist_type):
    """Test a built distribution"""
    dist_file = get_distribution(dist_type)

    ctx.run(cmd("pip", "install", "--ignore-installed", dist_file), pty=True)

    ctx.run(cmd(["pytest"] + _pytest_args()), pty=True)


def get_distribution(type):
    type_glob = {"sdist": "urlparts-*.tar.gz", "wheel": "urlparts-*.whl"}.get(type)

    if type_glob is None:
        raise ValueError("Unknown distribution type: {0}".format(type))

    pattern = path.join(ROOT, "dist", type_glob)
    dists = glob.glob(pattern)

    if len(dists) != 1:
        raise ValueError(
            "Expected one find one distribution matching: {0!r} "
            "but got: {1}".format(pattern, len(dists))
        )

    return dists[0]


def cmd(*args):
    r"""
    Create a shell command string from a list of arguments.

    >>> print(cmd("a", "b", "c"))
    a b c
    >>> print(cmd(["ls", "-l", "some dir"]))
    ls -l 'some dir'
    >>> print(cmd(["echo", "I'm a \"string\"."]))
    echo 'I'"'"'m a "string".'
    """
    if len(args) == 1 and not isinstance(args[0], str):
        return cmd(*args[0])
    return " ".join(shlex_quote(arg) for arg in args)
