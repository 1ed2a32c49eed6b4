[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlekit"
version = "0.1.0"
description = "Small algorithms on binary trees, linked lists, sequences and integer recurrences"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "binary-tree", "linked-list", "dynamic-programming", "puzzles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["puzzlekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
