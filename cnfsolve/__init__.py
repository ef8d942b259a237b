"""DIMACS CNF reading and DPLL, Davis-Putnam and resolution SAT solvers."""

__version__ = "0.1.0"
__all__ = ["cli", "cset", "dimacs", "dp", "dpll", "resolution", "solver"]