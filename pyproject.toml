[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tapesort"
version = "0.1.0"
description = "External sorting of exam score records by balanced multiway merging over tape files"
requires-python = ">=3.10"
dependencies = []
keywords = ["external sort", "balanced merge", "tapes", "records", "sorting"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tapesort = "tapesort.cli:main"
tapesort-datasets = "tapesort.datasets:main"

[tool.hatch.build.targets.wheel]
packages = ["tapesort"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
