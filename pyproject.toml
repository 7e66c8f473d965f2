[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solvebox"
version = "0.1.0"
description = "A small collection of classic algorithm solutions: tree traversal, grid search, counting and array puzzles."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "puzzles", "dynamic-programming", "segment-tree", "bfs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["solvebox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
