[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numlab"
version = "0.1.0"
description = "Small numerical toolkit: statistics, quadrature, Monte Carlo integration, root finding, ODE stepping and point-charge fields."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical methods",
    "integration",
    "monte carlo",
    "runge-kutta",
    "bisection",
    "statistics",
    "random numbers",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numlab-stats = "numlab.stats_cli:main"
numlab-distributions = "numlab.distributions_cli:main"
numlab-quadrature = "numlab.quadrature_cli:main"
numlab-montecarlo = "numlab.montecarlo_cli:main"
numlab-fields = "numlab.fields_cli:main"
numlab-ode = "numlab.ode_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numlab"]

[tool.pytest.ini_options]
addopts = "-ra"
