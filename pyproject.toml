[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arbortree"
version = "0.1.0"
description = "Binary trees, binary search trees, AVL trees and max binary heaps built from linked nodes"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary tree", "bst", "avl", "heap", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["arbortree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
