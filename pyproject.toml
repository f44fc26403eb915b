[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "libshelf"
version = "1.0.0"
description = "A small console library manager for books and periodicals: loans, returns and late penalties."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "loans", "catalogue", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
libshelf = "libshelf.cli:main"

[tool.setuptools.packages.find]
include = ["libshelf*"]

[tool.pytest.ini_options]
addopts = "-ra"
