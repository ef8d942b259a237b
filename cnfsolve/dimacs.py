"""Reading formulas in the DIMACS CNF format."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

log = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?\d+")


@dataclass
class DimacsFormula:
    """A CNF formula as declared and listed in a DIMACS file."""

    num_variables: int = 0
    num_clauses: int = 0
    clauses: list[list[int]] = field(default_factory=list)

    def format_clauses(self) -> str:
        """Render the parsed clauses, one per line, each terminated by 0."""
        lines = [f"Parsed Clauses ({len(self.clauses)} clauses):"]
        lines.extend(" ".join([*map(str, clause), "0"]) for clause in self.clauses)
        return "\n".join(lines)


def _leading_ints(tokens: Iterable[str]) -> Iterator[int]:
    """Yield integers from the start of ``tokens`` until a non-number or 0."""
    for token in tokens:
        match = _INTEGER.match(token)
        if match is None:
            return
        value = int(match.group())
        if value == 0:
            return
        yield value
        if match.end() < len(token):
            return


def _problem_counts(line: str) -> tuple[int, int]:
    """Read the variable and clause counts from a ``p cnf`` line."""
    counts = []
    for token in line.split()[2:4]:
        match = _INTEGER.fullmatch(token)
        if match is None:
            break
        counts.append(int(token))
    counts.extend([0] * (2 - len(counts)))
    return counts[0], counts[1]


def parse_dimacs(lines: Iterable[str] | str) -> DimacsFormula:
    """Parse DIMACS CNF text given as a string or as an iterable of lines.

    Comment lines and empty lines are skipped. Every other line that is not the
    problem line holds one clause, read up to its terminating 0.
    """
    if isinstance(lines, str):
        lines = lines.splitlines()
    formula = DimacsFormula()
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line or line[0] == "c":
            continue
        if line[0] == "p":
            formula.num_variables, formula.num_clauses = _problem_counts(line)
            log.debug(
                "Parsed problem line: %d literals, %d clauses",
                formula.num_variables,
                formula.num_clauses,
            )
            continue
        clause = list(_leading_ints(line.split()))
        if clause:
            formula.clauses.append(clause)
            log.debug("Parsed clause: %s 0", " ".join(map(str, clause)))
    return formula


def read_dimacs(path: str | os.PathLike[str]) -> DimacsFormula:
    """Read and parse a DIMACS CNF file; raises OSError if it cannot be opened."""
    with open(path, encoding="utf-8") as handle:
        return parse_dimacs(handle)