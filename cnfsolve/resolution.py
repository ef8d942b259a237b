"""Saturation by binary resolution."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cnfsolve.solver import SatSolver

log = logging.getLogger(__name__)


def is_tautology(clause: Iterable[int]) -> bool:
    """Whether the clause holds some literal together with its complement."""
    literals = set(clause)
    return any(-lit in literals for lit in literals)


def resolve(clause1: Iterable[int], clause2: Iterable[int]) -> frozenset[int] | None:
    """Resolve on the smallest literal of ``clause1`` whose complement is in ``clause2``.

    Returns None when there is no complementary pair or the resolvent is a
    tautology.
    """
    first = frozenset(clause1)
    second = frozenset(clause2)
    for literal in sorted(first):
        if -literal in second:
            resolvent = (first | second) - {literal, -literal}
            if is_tautology(resolvent):
                log.debug("Tautological resolvent discarded: %s", _format(resolvent))
                return None
            return resolvent
    return None


def _format(clause: Iterable[int]) -> str:
    return "{ " + "".join(f"{lit} " for lit in sorted(clause)) + "}"


class ResolutionSolver(SatSolver):
    """Decides satisfiability by adding resolvents until none are new."""

    max_clauses = 10000
    max_iterations = 1000

    def solve(self) -> bool:
        """Return False on an empty resolvent or when a limit is exceeded."""
        log.debug("Solving using Resolution...")
        clause_sets: list[frozenset[int]] = []
        seen: set[frozenset[int]] = set()
        for clause in self.clauses:
            clause_set = frozenset(clause)
            if is_tautology(clause_set):
                log.debug("Tautological clause removed: %s", _format(clause_set))
                continue
            clause_sets.append(clause_set)
            seen.add(clause_set)

        iterations = 0
        while True:
            clause_sets.sort(key=len)
            new_clauses: list[frozenset[int]] = []
            for i, first in enumerate(clause_sets):
                for second in clause_sets[i + 1:]:
                    resolvent = resolve(first, second)
                    if resolvent is None:
                        continue
                    if not resolvent:
                        log.debug("Empty resolvent found. UNSATISFIABLE.")
                        return False
                    if resolvent not in seen:
                        new_clauses.append(resolvent)
                        seen.add(resolvent)

            if not new_clauses:
                log.debug("No new clauses added. SATISFIABLE.")
                return True

            clause_sets.extend(new_clauses)

            if len(clause_sets) > self.max_clauses:
                log.debug("Clause limit exceeded (%d).", self.max_clauses)
                return False

            iterations += 1
            if iterations > self.max_iterations:
                log.debug("Iteration limit exceeded.")
                return False