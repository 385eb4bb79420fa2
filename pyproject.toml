[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termgrid"
version = "0.1.0"
description = "A small terminal grid game with a fixed frame rate and on-screen frame statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "game", "ansi", "game-loop", "tui"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termgrid = "termgrid.app:main"

[tool.hatch.build.targets.wheel]
packages = ["termgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
