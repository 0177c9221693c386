[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "currc"
version = "0.1.0"
description = "Classic data structures and a simulated first-fit memory pool"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "linked-list",
    "stack",
    "queue",
    "hashmap",
    "binary-search-tree",
    "memory-allocator",
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["currc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
