"""Interactive console for choosing a solver and running it on a DIMACS file."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import TextIO

from cnfsolve.dimacs import read_dimacs
from cnfsolve.dp import DPSolver
from cnfsolve.dpll import DPLLSolver
from cnfsolve.resolution import ResolutionSolver

_SOLVERS = {
    "dpll": DPLLSolver,
    "dp": DPSolver,
    "res": ResolutionSolver,
}

_CHOICES = {1: "dpll", 2: "dp", 3: "res"}

_MENU = (
    "\n=== SAT Solver Console ===\n"
    "Available solvers:\n"
    "1. DPLL algorithm\n"
    "2. Davis-Putnam algorithm\n"
    "3. Resolution-based solver\n"
    "0. Exit\n"
    "Choose a solver (0-3): "
)


def solver_name(choice: int) -> str:
    """The solver name for a menu choice, or an empty string if there is none."""
    return _CHOICES.get(choice, "")


def run_solver(name: str, path: str | Path, out: TextIO) -> bool:
    """Run the named solver on a DIMACS file, report to ``out`` and return the result."""
    try:
        solver_class = _SOLVERS[name]
    except KeyError:
        raise ValueError(f"unknown solver: {name!r}") from None
    solver = solver_class.from_file(path)
    formula = read_dimacs(path)

    start = time.perf_counter()
    out.write("Parser initialized successfully\n")
    out.write("Formula statistics:\n")
    out.write(f"Variables: {formula.num_variables}\n")
    out.write(f"Clauses: {formula.num_clauses}\n")

    result = solver.solve()
    elapsed_ms = int((time.perf_counter() - start) * 1000)

    verdict = "SATISFIABLE" if result else "UNSATISFIABLE"
    out.write(f"Final result: The formula is {verdict}.\n")
    out.write(f"Solving time: {elapsed_ms}ms\n")
    return result


def _parse_choice(line: str) -> int | None:
    tokens = line.split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def main(argv: list[str] | None = None) -> int:
    """Run the interactive solver menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="cnfsolve",
        description="Interactively decide satisfiability of DIMACS CNF files.",
    )
    parser.parse_args(argv)

    stdin, out = sys.stdin, sys.stdout
    while True:
        out.write(_MENU)
        out.flush()
        line = stdin.readline()
        if not line:
            return 0
        choice = _parse_choice(line)

        if choice == 0:
            out.write("Goodbye!\n")
            return 0
        name = solver_name(choice) if choice is not None else ""
        if not name:
            out.write("Invalid choice. Please try again.\n")
            continue

        out.write("\nEnter the path to your DIMACS CNF file: ")
        out.flush()
        line = stdin.readline()
        if not line:
            return 0
        tokens = line.split()
        filename = tokens[0] if tokens else ""

        if not filename or not Path(filename).is_file():
            out.write(f"Error: File does not exist: {filename}\n")
            continue

        out.write(f"\nSolving with {name} solver...\n")
        try:
            run_solver(name, filename, out)
        except (OSError, ValueError) as error:
            out.write(f"Error: {error}\n")

        out.write("\nPress Enter to continue...")
        out.flush()
        if not stdin.readline():
            return 0


if __name__ == "__main__":
    sys.exit(main())