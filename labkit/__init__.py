"""Complex and rational numbers, simple containers and competitive-programming solvers."""

__version__ = "0.1.0"