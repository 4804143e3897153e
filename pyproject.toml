[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockfit"
version = "0.1.0"
description = "Enumerate every way a program of a given size fits exactly into a set of free memory blocks"
requires-python = ">=3.10"
dependencies = []
keywords = ["memory", "allocation", "combinations", "blocks", "combinatorics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
blockfit = "blockfit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["blockfit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
