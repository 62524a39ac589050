[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libradesk"
version = "0.1.0"
description = "A small console library management program: accounts, a book catalogue and librarian tools backed by plain text files."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "catalogue", "accounts", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
libradesk = "libradesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["libradesk"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
