"""Numerical methods: statistics, random sampling, quadrature, roots, fields and ODEs,
with small command-line programs built on them."""

__version__ = "0.1.0"

__all__ = [
    "functions",
    "random_gen",
    "stats",
    "geometry",
    "roots",
    "integration",
    "vectors",
    "ode",
    "stats_cli",
    "distributions_cli",
    "quadrature_cli",
    "montecarlo_cli",
    "fields_cli",
    "ode_cli",
]