[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sudokugraphs"
version = "0.1.0"
description = "Enumerate small sudoku solutions and the labelled graphs whose node degrees match their cells"
requires-python = ">=3.10"
dependencies = []
keywords = ["sudoku", "graph", "combinatorics", "enumeration", "backtracking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sudokugraphs = "sudokugraphs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sudokugraphs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
