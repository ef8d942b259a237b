import io
import sys

import pytest

from cnfsolve.cli import main, run_solver, solver_name

SAT_CNF = "c satisfiable\np cnf 2 2\n1 2 0\n1 -2 0\n"
UNSAT_CNF = "c unsatisfiable\np cnf 2 4\n1 2 0\n-1 2 0\n1 -2 0\n-1 -2 0\n"


@pytest.fixture
def sat_file(tmp_path):
    path = tmp_path / "sat.cnf"
    path.write_text(SAT_CNF)
    return path


@pytest.fixture
def unsat_file(tmp_path):
    path = tmp_path / "unsat.cnf"
    path.write_text(UNSAT_CNF)
    return path


def _run_main(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    out = io.StringIO()
    monkeypatch.setattr(sys, "stdout", out)
    code = main([])
    return code, out.getvalue()


@pytest.mark.parametrize(
    "choice, expected", [(1, "dpll"), (2, "dp"), (3, "res"), (0, ""), (4, "")]
)
def test_solver_name(choice, expected):
    assert solver_name(choice) == expected


@pytest.mark.parametrize("name", ["dpll", "dp", "res"])
def test_run_solver_satisfiable(name, sat_file):
    out = io.StringIO()
    assert run_solver(name, sat_file, out) is True
    text = out.getvalue()
    assert "Final result: The formula is SATISFIABLE." in text
    assert "Variables: 2" in text
    assert "Clauses: 2" in text


@pytest.mark.parametrize("name", ["dpll", "dp", "res"])
def test_run_solver_unsatisfiable(name, unsat_file):
    out = io.StringIO()
    assert run_solver(name, unsat_file, out) is False
    assert "Final result: The formula is UNSATISFIABLE." in out.getvalue()


def test_run_solver_unknown_name(sat_file):
    with pytest.raises(ValueError):
        run_solver("walksat", sat_file, io.StringIO())


def test_run_solver_missing_file(tmp_path):
    with pytest.raises(OSError):
        run_solver("dp", tmp_path / "missing.cnf", io.StringIO())


def test_main_exit(monkeypatch):
    code, text = _run_main(monkeypatch, "0\n")
    assert code == 0
    assert "Goodbye!" in text


def test_main_invalid_choice(monkeypatch):
    code, text = _run_main(monkeypatch, "7\nabc\n0\n")
    assert code == 0
    assert text.count("Invalid choice. Please try again.") == 2


def test_main_missing_file(monkeypatch, tmp_path):
    missing = tmp_path / "nope.cnf"
    code, text = _run_main(monkeypatch, f"1\n{missing}\n0\n")
    assert code == 0
    assert f"Error: File does not exist: {missing}" in text


def test_main_solves_file(monkeypatch, sat_file):
    code, text = _run_main(monkeypatch, f"2\n{sat_file}\n\n0\n")
    assert code == 0
    assert "Solving with dp solver..." in text
    assert "The formula is SATISFIABLE." in text
    assert text.rstrip().endswith("Goodbye!")


def test_main_end_of_input(monkeypatch):
    code, text = _run_main(monkeypatch, "")
    assert code == 0
    assert "Goodbye!" not in text