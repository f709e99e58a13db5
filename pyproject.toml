[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treepath"
version = "0.1.0"
description = "Find the maximum-sum root-to-leaf path in a tree, serially or with worker threads"
requires-python = ">=3.10"
dependencies = []
keywords = ["tree", "maximum path", "path sum", "threads"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
treepath = "treepath.cli:main"
treepath-generate = "treepath.generate:main"

[tool.hatch.build.targets.wheel]
packages = ["treepath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
