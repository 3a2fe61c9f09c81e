[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kgx"
version = "48.0.1"
description = "Terminal session tooling: process watching, session status tracking, theme selection, colours and window header helpers"
requires-python = ">=3.10"
keywords = ["terminal", "console", "process", "watcher", "session"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
]
dependencies = ["psutil"]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kgx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
