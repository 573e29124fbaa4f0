[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dstructs"
version = "0.1.0"
description = "A B-tree, a chained hash table, a linked list and a genetic-algorithm benchmark suite"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "b-tree",
    "hash-table",
    "linked-list",
    "genetic-algorithm",
    "benchmark-functions",
    "optimization",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dstructs-ga = "dstructs.ga:main"

[tool.hatch.build.targets.wheel]
packages = ["dstructs"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
