"""The Davis-Putnam procedure: simplification plus one resolution step at a time."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from itertools import combinations

from cnfsolve.resolution import is_tautology
from cnfsolve.solver import SatSolver

log = logging.getLogger(__name__)


def _pivot(first: Sequence[int], second: Sequence[int]) -> int | None:
    """The first literal of ``first`` whose complement occurs in ``second``."""
    return next((lit for lit in first if -lit in second), None)


def verify_solution(assignment: Iterable[int], clauses: Iterable[Iterable[int]]) -> bool:
    """Whether every clause holds at least one literal of ``assignment``."""
    assigned = set(assignment)
    log.debug("Verifying assignment: %s", " ".join(map(str, assigned)))
    for clause in clauses:
        clause = list(clause)
        satisfied = next((lit for lit in clause if lit in assigned), None)
        if satisfied is None:
            log.debug("Clause not satisfied: %s", " ".join(map(str, clause)))
            return False
        log.debug("Clause satisfied by literal: %d", satisfied)
    return True


class DPSolver(SatSolver):
    """Decides satisfiability by unit propagation, pure literals and resolution."""

    def solve(self) -> bool:
        """Return True if the formula is judged satisfiable.

        Literals fixed along the way are collected in ``assignment``.
        """
        log.debug("Starting Davis-Putnam solver...")
        while self.clauses:
            before = len(self.clauses)

            self.unit_propagation(self.assignment)
            if self.has_empty_clause():
                log.debug("Empty clause found after unit propagation. UNSAT.")
                return False
            if not self.clauses:
                log.debug("All clauses satisfied after unit propagation. SAT.")
                return True

            self.eliminate_pure_literals(self.assignment)
            if self.has_empty_clause():
                log.debug("Empty clause found after pure literal elimination. UNSAT.")
                return False
            if not self.clauses:
                log.debug("All clauses satisfied after pure literal elimination. SAT.")
                return True

            if len(self.clauses) == before:
                log.debug("No changes from UP or PL, attempting resolution step...")
                current = [list(clause) for clause in self.clauses]
                extended = self.single_step(current)
                if len(extended) == len(current):
                    log.debug("No new clauses from resolution. Formula is SAT.")
                    return True
                self.clauses = extended
                log.debug("Resolution step added new clause(s). Continuing...")

            log.debug("Current clause count: %d", len(self.clauses))
            log.debug("Current clauses:\n%s", self.format_clauses())

        log.debug("All clauses processed. Formula is SAT.")
        return True

    def single_step(self, clause_set: Iterable[Iterable[int]]) -> list[list[int]]:
        """Return ``clause_set`` with at most one new, non-tautological resolvent added.

        Clause pairs are tried shortest first (by combined length, then by
        position); the first resolvent not already present is appended.
        """
        clauses = [list(clause) for clause in clause_set]
        result = list(clauses)
        candidates = sorted(
            (len(first) + len(second), i, j)
            for (i, first), (j, second) in combinations(enumerate(clauses), 2)
            if _pivot(first, second) is not None
        )
        for _, i, j in candidates:
            first, second = clauses[i], clauses[j]
            pivot = _pivot(first, second)
            resolvent = sorted(
                {lit for lit in first if lit != pivot}
                | {lit for lit in second if lit != -pivot}
            )
            if is_tautology(resolvent):
                continue
            if any(sorted(existing) == resolvent for existing in result):
                continue
            log.debug("New resolvent found: %s", " ".join(map(str, resolvent)))
            result.append(resolvent)
            return result
        return result

    def add_to_assignment(self, literal: int) -> None:
        """Make ``literal`` true, dropping satisfied clauses and its complement."""
        self.assignment.append(literal)
        simplified = []
        for clause in self.clauses:
            if literal in clause:
                continue
            reduced = [lit for lit in clause if lit != -literal]
            if reduced:
                simplified.append(reduced)
        self.clauses = simplified