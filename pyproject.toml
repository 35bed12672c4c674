[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tangyutil"
version = "0.1.0"
description = "Diagram-layout helpers: a slot-based dictionary, word splitting, separator lists, link-map expansion and curve geometry"
requires-python = ">=3.10"
dependencies = []
keywords = ["diagram", "layout", "bezier", "dictionary", "link map"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tangyutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
