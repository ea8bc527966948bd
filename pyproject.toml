[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kruskalbench"
version = "0.1.0"
description = "Benchmark four variants of Kruskal's minimum spanning tree algorithm on random complete graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["kruskal", "minimum spanning tree", "union-find", "benchmark", "graph"]
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
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kruskalbench = "kruskalbench.experiment:main"

[tool.hatch.build.targets.wheel]
packages = ["kruskalbench"]

[tool.pytest.ini_options]
addopts = "-ra"
