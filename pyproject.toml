[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "twine-models"
version = "0.1.0"
description = "Numeric constraints and discretized heat exchanger building blocks for engineering models"
requires-python = ">=3.10"
dependencies = []
keywords = ["heat exchanger", "thermodynamics", "engineering", "constraints", "modeling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["twine_models"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
