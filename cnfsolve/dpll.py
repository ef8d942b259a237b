"""A DPLL search over the clause set."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable

from cnfsolve.solver import SatSolver

log = logging.getLogger(__name__)


class DPLLSolver(SatSolver):
    """Decides satisfiability by simplification and branching on literals."""

    def __init__(
        self,
        clauses: Iterable[Iterable[int]],
        num_variables: int = 0,
        num_clauses: int | None = None,
    ) -> None:
        super().__init__(clauses, num_variables, num_clauses)
        self.final_assignment: list[int] = []

    def solve(self) -> bool:
        """Return True if the formula is satisfiable; records ``final_assignment``."""
        log.debug("Solving using DPLL...")
        assignment: list[int] = []
        result = self._search(assignment)
        if result:
            self.final_assignment = assignment
            log.debug("SATISFIABLE; assignment: %s", " ".join(map(str, assignment)))
        else:
            log.debug("UNSATISFIABLE")
        return result

    def _search(self, assignment: list[int]) -> bool:
        changed = True
        while changed:
            before = len(assignment)
            self.unit_propagation(assignment)
            if self.has_empty_clause():
                log.debug("Empty clause found after unit propagation")
                return False
            grown = len(assignment) > before

            before = len(assignment)
            self.eliminate_pure_literals(assignment)
            if self.has_empty_clause():
                log.debug("Empty clause found after pure literal elimination")
                return False
            changed = grown or len(assignment) > before

        if not self.clauses:
            log.debug("All clauses satisfied")
            return True

        literal = self.choose_literal(assignment)
        if literal == 0:
            log.debug("No literal to choose")
            return False

        log.debug("Branching on literal: %d", literal)
        saved_clauses = list(self.clauses)
        saved_assignment = list(assignment)
        for branch in (literal, -literal):
            self.clauses = list(saved_clauses)
            assignment[:] = saved_assignment
            self.add_to_assignment(branch)
            if self._search(assignment):
                return True

        assignment[:] = saved_assignment
        self.clauses = saved_clauses
        return False

    def choose_literal(self, assignment: Iterable[int]) -> int:
        """Pick the most frequent unassigned variable, in its more frequent polarity.

        Returns 0 when no unassigned literal occurs in the clause set.
        """
        assigned = set(assignment)
        frequency = Counter(
            lit
            for clause in self.clauses
            for lit in clause
            if lit not in assigned and -lit not in assigned
        )
        best_total = 0
        chosen = 0
        for lit in sorted(frequency):
            count = frequency[lit]
            opposite = frequency.get(-lit, 0)
            total = count + opposite
            if total > best_total:
                best_total = total
                chosen = lit if count >= opposite else -lit
        return chosen

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