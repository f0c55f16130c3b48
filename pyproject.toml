[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slide2048"
version = "1.0.0"
description = "The 2048 sliding-tile puzzle on a board of any size, with animated tiles"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["2048", "puzzle", "game", "pygame", "sliding tiles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
slide2048 = "slide2048.app:main"

[tool.hatch.build.targets.wheel]
packages = ["slide2048"]

[tool.pytest.ini_options]
addopts = "-ra"
