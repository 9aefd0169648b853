[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "algolab"
version = "0.1.0"
description = "Small algorithm exercises: bounds, tic-tac-toe, array loading, string comparison, sorting with statistics, phrase assembly, weather tables and player rankings"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "sorting", "quicksort", "insertion sort", "selection sort", "education", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-bounds = "algolab.bounds:main"
algolab-tictactoe = "algolab.tictactoe:main"
algolab-array = "algolab.arrays:main"
algolab-fixstring = "algolab.fixstring:main"
algolab-sort = "algolab.sorting:main"
algolab-phrase = "algolab.phrase:main"
algolab-weather = "algolab.weather:main"
algolab-players = "algolab.players:main"

[tool.setuptools.packages.find]
include = ["algolab*"]

[tool.pytest.ini_options]
addopts = "-ra"
