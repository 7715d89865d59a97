[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pmmleval"
version = "0.1.0"
description = "Building blocks for evaluating PMML predictive models: values, predicates, built-in functions and normalization methods"
requires-python = ">=3.10"
dependencies = []
keywords = ["pmml", "scoring", "machine-learning", "predictive-models", "regression", "decision-tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pmmleval"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
