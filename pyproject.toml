[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bstree"
version = "0.1.0"
description = "Binary trees and binary search trees with parent links, plus Graphviz dot export"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary tree", "binary search tree", "bst", "graphviz", "dot", "data structures"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bstree-demo = "bstree.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["bstree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
