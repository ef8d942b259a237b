[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cnfsolve"
version = "0.1.0"
description = "DIMACS CNF reader with DPLL, Davis-Putnam and resolution SAT solvers"
requires-python = ">=3.10"
dependencies = []
keywords = ["sat", "cnf", "dimacs", "dpll", "davis-putnam", "resolution", "logic"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cnfsolve = "cnfsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cnfsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
