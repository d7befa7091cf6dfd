[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fuzzmatch"
version = "0.1.0"
description = "Edit distances and string similarity: Levenshtein, Indel, OSA, Hamming and Jaro-Winkler"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "fuzzy",
    "string-matching",
    "levenshtein",
    "edit-distance",
    "jaro-winkler",
    "similarity",
]
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
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["fuzzmatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
