[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tpestructuras"
version = "0.1.0"
description = "Recursion and keyed-list exercises as plain Python functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["recursion", "lists", "data structures", "exercises", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
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

[tool.hatch.build.targets.wheel]
packages = ["tpestructuras"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
