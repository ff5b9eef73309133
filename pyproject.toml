[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dailyalgos"
version = "0.1.0"
description = "Classic algorithm and data-structure routines on plain Python values: arrays, strings, matrices, linked lists, trees, graphs and dynamic programming."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "graphs", "dynamic-programming", "trees"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dailyalgos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
