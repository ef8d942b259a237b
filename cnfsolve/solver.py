"""Shared clause-set machinery for the CNF solvers."""

from __future__ import annotations

import logging
import os
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import combinations

from cnfsolve.dimacs import read_dimacs

log = logging.getLogger(__name__)


@dataclass
class _WatchedClause:
    watch1: int
    watch2: int
    clause: list[int]


class SatSolver:
    """A clause set with unit propagation and pure-literal elimination."""

    def __init__(
        self,
        clauses: Iterable[Iterable[int]],
        num_variables: int = 0,
        num_clauses: int | None = None,
    ) -> None:
        self.clauses: list[list[int]] = [list(clause) for clause in clauses]
        self.num_variables = num_variables
        self.num_clauses = len(self.clauses) if num_clauses is None else num_clauses
        self.assignment: list[int] = []
        self._watched: list[_WatchedClause] = []
        self._watchers: defaultdict[int, list[int]] = defaultdict(list)
        log.debug(
            "Number of literals: %d, Number of clauses: %d",
            self.num_variables,
            self.num_clauses,
        )

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]):
        """Build a solver from a DIMACS CNF file."""
        log.debug("Initializing solver with file: %s", path)
        formula = read_dimacs(path)
        return cls(formula.clauses, formula.num_variables, formula.num_clauses)

    # Watched literals -------------------------------------------------

    def _init_watches(self) -> None:
        self._watched.clear()
        self._watchers.clear()
        for clause in self.clauses:
            if len(clause) >= 2:
                index = len(self._watched)
                self._watched.append(_WatchedClause(clause[0], clause[1], list(clause)))
                self._watchers[clause[0]].append(index)
                self._watchers[clause[1]].append(index)

    def _rewatch(self, index: int, literal: int, assignment: list[int]) -> int | None:
        """Move a watch off ``-literal``; return the remaining watch if none is free."""
        wc = self._watched[index]
        if wc.watch1 in assignment or wc.watch2 in assignment:
            return None
        for lit in wc.clause:
            if lit not in (wc.watch1, wc.watch2) and -lit not in assignment:
                if wc.watch1 == -literal:
                    wc.watch1 = lit
                else:
                    wc.watch2 = lit
                self._watchers[lit].append(index)
                return None
        return wc.watch2 if wc.watch1 == -literal else wc.watch1

    def _update_watches(self, literal: int, assignment: list[int]) -> bool:
        """Process the clauses watching ``-literal``; return True on a conflict."""
        for index in list(self._watchers[-literal]):
            other = self._rewatch(index, literal, assignment)
            if other is None:
                continue
            if -other in assignment:
                return True
            assignment.append(other)
            self._propagate(other, assignment)
        return False

    def _propagate(self, literal: int, assignment: list[int]) -> None:
        """Follow implied units from ``literal``, ignoring conflicts."""
        stack = [(literal, iter(list(self._watchers[-literal])))]
        while stack:
            current, pending = stack[-1]
            index = next(pending, None)
            if index is None:
                stack.pop()
                continue
            other = self._rewatch(index, current, assignment)
            if other is not None and -other not in assignment:
                assignment.append(other)
                stack.append((other, iter(list(self._watchers[-other]))))

    # Simplification ---------------------------------------------------

    def unit_propagation(self, assignment: list[int]) -> None:
        """Assign every unit clause, extending ``assignment`` in place.

        Unit clauses are removed from the clause set. On a conflict the clause
        set becomes a single empty clause.
        """
        log.debug("Starting unit propagation...")
        if not self._watched:
            self._init_watches()
        changed = True
        while changed:
            changed = False
            remaining = []
            for clause in self.clauses:
                if len(clause) != 1:
                    remaining.append(clause)
                    continue
                unit = clause[0]
                log.debug("Propagating unit: %d", unit)
                assignment.append(unit)
                if self._update_watches(unit, assignment):
                    self.clauses = [[]]
                    return
                changed = True
            self.clauses = remaining
        log.debug("Unit propagation completed.")

    def eliminate_pure_literals(self, assignment: list[int]) -> None:
        """Assign variables occurring only positively, extending ``assignment``.

        When any such variable is found, every clause holding a literal whose
        complement never occurs is dropped.
        """
        changed = True
        while changed:
            changed = False
            positive = {lit for clause in self.clauses for lit in clause if lit > 0}
            negative = {-lit for clause in self.clauses for lit in clause if lit < 0}
            pure = sorted(positive - negative)
            if pure:
                for var in pure:
                    log.debug("Pure positive literal found: %d", var)
                assignment.extend(pure)
                changed = True
                self.clauses = [
                    clause
                    for clause in self.clauses
                    if not any(
                        (lit > 0 and lit not in negative) or (lit < 0 and -lit not in positive)
                        for lit in clause
                    )
                ]
            log.debug("Current clauses:\n%s", self.format_clauses())
            if not self.clauses:
                break

    # Queries ----------------------------------------------------------

    def has_empty_clause(self) -> bool:
        """Whether the clause set holds an empty (falsified) clause."""
        return any(not clause for clause in self.clauses)

    def has_binary_contradiction(self) -> bool:
        """Whether two binary clauses are complementary, as (a, b) and (-a, -b)."""
        binary = [clause for clause in self.clauses if len(clause) == 2]
        for (lit1, lit2), (other1, other2) in combinations(binary, 2):
            if (other1 == -lit1 and other2 == -lit2) or (other1 == -lit2 and other2 == -lit1):
                log.debug(
                    "Contradiction found in binary clauses: (%d, %d) and (%d, %d)",
                    lit1,
                    lit2,
                    -lit1,
                    -lit2,
                )
                return True
        return False

    def add_to_assignment(self, literal: int) -> None:
        """Make ``literal`` true and simplify the clause set.

        Satisfied clauses are dropped, the complement is removed from the rest,
        and clauses left empty are discarded.
        """
        self.assignment.append(literal)
        simplified = []
        for clause in self.clauses:
            if literal in clause:
                continue
            reduced = [lit for lit in clause if lit != -literal]
            if reduced:
                simplified.append(reduced)
        self.clauses = simplified

    def format_clauses(self) -> str:
        """Render the current clauses, one per line, each terminated by 0."""
        return "\n".join(" ".join([*map(str, clause), "0"]) for clause in self.clauses)