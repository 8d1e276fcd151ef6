[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netlogkit"
version = "0.1.0"
description = "Analyse network connection logs with graphs, search trees and hash maps"
requires-python = ">=3.10"
dependencies = []
keywords = ["network", "log analysis", "graph", "binary search tree", "hash map", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Log Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netlogkit = "netlogkit.cli:main"
netlogkit-traversal = "netlogkit.traversal:main"

[tool.hatch.build.targets.wheel]
packages = ["netlogkit"]

[tool.pytest.ini_options]
addopts = "-ra"
