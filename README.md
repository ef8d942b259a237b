# cnfsolve

A small toolkit for propositional satisfiability. It reads formulas in
DIMACS CNF format and decides them with one of three procedures:

- **DPLL** (`cnfsolve.dpll.DPLLSolver`): unit propagation, pure literal
  elimination and branching on the most frequent unassigned literal.
  After a satisfiable result the literals fixed by the search are in
  `final_assignment`.
- **Davis-Putnam** (`cnfsolve.dp.DPSolver`): unit propagation and pure
  literal elimination, with one resolution step (`single_step`) taken
  whenever simplification leaves the clause count unchanged. It reports
  the formula satisfiable as soon as no new resolvent can be added. The
  literals it fixed along the way are in `assignment`.
- **Resolution** (`cnfsolve.resolution.ResolutionSolver`): saturation by
  resolution. It returns `False` on an empty resolvent, and also when the
  clause set grows past `max_clauses` (10000) or the number of rounds
  passes `max_iterations` (1000); it returns `True` when a round adds no
  new clause.

All three build on `cnfsolve.solver.SatSolver`, which holds the clause
set and provides `unit_propagation`, `eliminate_pure_literals` (which
assigns variables that occur only positively), `has_empty_clause`,
`has_binary_contradiction`, `add_to_assignment` and `format_clauses`.

The solvers trace their work through the standard `logging` module at
DEBUG level; enable it to follow small formulas step by step:

```python
import logging
logging.basicConfig(level=logging.DEBUG)
```

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Interactive use

```
cnfsolve
```

You get a menu. Choose a solver (1 = DPLL, 2 = Davis-Putnam,
3 = resolution, 0 = exit), then enter the path of a `.cnf` file. The
program prints the variable and clause counts declared in the file,
whether the formula is satisfiable, and how long solving took in
milliseconds, then waits for Enter before showing the menu again. It also
stops at the end of its input. The command takes no options other than
`--help`.

## Library use

```python
from cnfsolve.dimacs import read_dimacs
from cnfsolve.dp import verify_solution
from cnfsolve.dpll import DPLLSolver

formula = read_dimacs("problem.cnf")
print(formula.format_clauses())

solver = DPLLSolver.from_file("problem.cnf")
if solver.solve():
    print("SAT", verify_solution(solver.final_assignment, formula.clauses))
else:
    print("UNSAT")
```

`read_dimacs` raises `OSError` if the file cannot be opened.
`parse_dimacs` takes a string or any iterable of lines, so formulas can be
built in memory; it returns a `DimacsFormula` with `num_variables`,
`num_clauses` and `clauses`. A solver can also be built directly from
clauses with `SatSolver(clauses, num_variables, num_clauses)`, or with the
same arguments for each subclass.

`cnfsolve.cli` exposes `solver_name(choice)`, which maps a menu number to
`"dpll"`, `"dp"` or `"res"`, and `run_solver(name, path, out)`, which runs
one solver on a file and writes the report to a text stream.

The `resolution` module has the stand-alone helpers `resolve` and
`is_tautology` for clauses given as collections of literals, and
`dp.verify_solution` checks that every clause holds a literal of an
assignment.

`cnfsolve.cset.CSet` is a small ordered, growable list of integers with
`append`, `extend`, `reverse`, `len()`, iteration and a `[a, b, c]` string
form.

## What it does not do

There is no output of a model in DIMACS solution format and no
command-line mode that solves a file without the interactive menu; use
the library functions for that.