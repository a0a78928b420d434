[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dshomework"
version = "0.1.0"
description = "Small data-structure exercises: browser history, an AVL address book, greedy bit-window flips and a patient triage heap"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "stack", "avl tree", "heap", "priority queue", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dshomework-browser = "dshomework.browser:main"
dshomework-address-book = "dshomework.address_book:main"
dshomework-flips = "dshomework.flips:main"
dshomework-triage = "dshomework.triage:main"

[tool.hatch.build.targets.wheel]
packages = ["dshomework"]

[tool.pytest.ini_options]
addopts = "-ra"
