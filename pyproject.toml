[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "akinator"
version = "0.1.0"
description = "A console guessing game that learns new objects as it plays"
requires-python = ">=3.10"
dependencies = []
keywords = ["akinator", "game", "guessing", "binary-tree", "console", "graphviz"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
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
test = ["pytest"]

[project.scripts]
akinator = "akinator.game:main"

[tool.hatch.build.targets.wheel]
packages = ["akinator"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
