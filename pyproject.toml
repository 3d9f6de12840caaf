[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsa-kit"
version = "0.1.0"
description = "Small, readable implementations of classic data structures and algorithms."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "heap",
    "linked-list",
    "stack",
    "trees",
    "recursion",
    "two-pointers",
    "hashing",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsa_kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
