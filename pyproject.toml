[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamelib"
version = "0.1.0"
description = "Building blocks for terminal games: ECS storage, sessions, console UI cells and layers, packets and ANSI helpers."
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["game", "ecs", "terminal", "ansi", "console-ui", "sessions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gamelib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
