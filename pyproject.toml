[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ymbase"
version = "0.1.0"
description = "Small building blocks: JSON value trees, union-find, option strings, shared strings, a position-tracking scanner, DOT output and message handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "union-find", "scanner", "graphviz", "dot", "messages", "string-pool"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ymbase"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
