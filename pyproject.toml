[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arbolnif"
version = "0.1.0"
description = "Binary search, level-filled and AVL trees of eight-digit NIF keys, with an interactive menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary tree", "avl", "search tree", "nif", "data structures"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Natural Language :: Spanish",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arbolnif = "arbolnif.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["arbolnif"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
