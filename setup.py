import io

from setuptools import setup


def file_contents(path):
    with io.open(path, encoding="utf-8") as f:
        return f.read()


def file_lines(path):
    return [
        line
        for line in file_contents(path).split("\n")
        if line.strip() and not line.startswith("#")
    ]


setup(
    name="urlparts",
    description="Split URLs into components and resolve relative references "
    "(RFC 3986)",
    long_description=file_contents("README.rst"),
    version="1.0.0",
    packages=["urlparts", "urlparts.test"],
    python_requires=">=3.8",
    install_requires=file_lines("requirements/install.txt"),
    extras_require={"tests": file_lines("requirements/test.txt")},
    entry_points={"console_scripts": ["urlparts = urlparts.cmdline:main"]},
    include_package_data=True,
    license="Apache 2.0",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords="url uri rfc3986 parse resolve relative reference dot-segments",
)
