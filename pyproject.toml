[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algoritmos"
version = "0.1.0"
description = "Classic data structures and small algorithmic problems: red-black trees, sorted and circular linked lists, Josephus, pair counting and number puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "red-black tree",
    "linked list",
    "circular list",
    "josephus",
    "binary search",
    "data structures",
    "algorithms",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
algoritmos-rbtree = "algoritmos.rbtree:main"
algoritmos-sorted-list = "algoritmos.sorted_list:main"
algoritmos-circular = "algoritmos.circular:main"
algoritmos-josephus = "algoritmos.josephus:main"
algoritmos-subsets = "algoritmos.subsets:main"
algoritmos-dora = "algoritmos.numbers:dora_main"
algoritmos-triangular = "algoritmos.numbers:triangular_main"
algoritmos-demo = "algoritmos.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["algoritmos"]

[tool.hatch.build.targets.sdist]
include = ["algoritmos", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
