[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boxchess"
version = "0.1.0"
description = "A two-player chess game on a resizable window, with pins, castling, en passant and promotion."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["chess", "game", "board-game", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
boxchess = "boxchess.window:main"

[tool.hatch.build.targets.wheel]
packages = ["boxchess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
