[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ocnet"
version = "0.3.20"
description = "Object-centric process mining structures: case graphs, object-centric Petri nets, markings and reachability"
requires-python = ">=3.10"
dependencies = []
keywords = ["process-mining", "petri-net", "object-centric", "case-graph", "event-data"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ocnet"]

[tool.pytest.ini_options]
addopts = "-ra"
