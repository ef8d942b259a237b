import pytest

from cnfsolve.resolution import ResolutionSolver, is_tautology, resolve


@pytest.mark.parametrize(
    ("clause", "expected"),
    [({1, -1}, True), ({1, 2, -2}, True), ({1, 2}, False), (set(), False)],
)
def test_is_tautology(clause, expected):
    assert is_tautology(clause) is expected


def test_resolve_produces_resolvent():
    assert resolve({1, 2}, {-1, 3}) == frozenset({2, 3})


def test_resolve_to_empty_clause():
    assert resolve({1}, {-1}) == frozenset()


def test_resolve_discards_tautology():
    assert resolve({1, 2}, {-1, -2}) is None


def test_resolve_without_complement():
    assert resolve({1, 2}, {3}) is None


def test_contradictory_units_unsat():
    assert ResolutionSolver([[1], [-1]]).solve() is False


def test_satisfiable_formula():
    assert ResolutionSolver([[1, 2], [-1, 2]]).solve() is True


def test_classic_unsatisfiable_formula():
    assert ResolutionSolver([[1, 2], [1, -2], [-1, 2], [-1, -2]]).solve() is False


def test_tautological_input_is_dropped():
    assert ResolutionSolver([[1, -1]]).solve() is True


def test_clause_limit_reports_unsat():
    solver = ResolutionSolver([[1, 2], [-1, 3]])
    solver.max_clauses = 2
    assert solver.solve() is False


def test_solve_leaves_clauses_untouched():
    solver = ResolutionSolver([[1, 2], [-1, 2]])
    solver.solve()
    assert solver.clauses == [[1, 2], [-1, 2]]


def test_solve_from_file(tmp_path):
    path = tmp_path / "ex.cnf"
    path.write_text("c sample\np cnf 2 4\n1 2 0\n1 -2 0\n-1 2 0\n-1 -2 0\n")
    solver = ResolutionSolver.from_file(path)
    assert solver.num_clauses == 4
    assert solver.solve() is False