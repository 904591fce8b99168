[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "autocompleteme"
version = "0.1.0"
description = "Prefix search over weighted terms, ranked by weight"
requires-python = ">=3.10"
dependencies = []
keywords = ["autocomplete", "prefix", "search", "binary search", "ranking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["autocompleteme"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
