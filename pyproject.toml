[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "splitshare"
version = "0.1.0"
description = "Interactive terminal tool for recording shared expenses within named groups"
requires-python = ">=3.10"
dependencies = []
keywords = ["expenses", "split", "groups", "terminal", "accounting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
splitshare = "splitshare.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["splitshare"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
