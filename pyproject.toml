[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonpp"
version = "0.1.0"
description = "A small JSON syntax tree with typed values, an indented printer, escape handling and document statistics."
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "syntax tree", "unescape", "utf-8", "statistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jsonpp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
