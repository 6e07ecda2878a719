import logging

import pytest

from lr0.automaton import build_automaton
from lr0.errors import ConflictError
from lr0.grammar import END, Grammar, Production
from lr0.table import ERROR, Accept, ConflictKind, Goto, Reduce, Shift, build, build_table


def test_single(single):
    table = build(single)
    assert table.columns == ["a", END, "S'", "S"]
    assert len(table) == 3
    assert table[0, "S"] == Goto(1)
    assert table[0, "a"] == Shift(2)
    assert table[0, END] == ERROR
    assert table[1, END] == Accept()
    assert table[2, "a"] == Reduce(Production("S", ("a",)))
    assert table[2, END] == Reduce(Production("S", ("a",)))
    assert table[2, "a"].lhs == "S"
    assert table.actions(0) == {"a": Shift(2), "S": Goto(1)}
    assert table.actions(1) == {END: Accept()}
    assert not table.has_conflicts
    table.raise_for_conflicts()


def test_expr_shifts_every_terminal(expr):
    table = build(expr)
    automaton = table.automaton
    for a in expr.terminals:
        assert any(isinstance(table[i, a], Shift) for i in range(len(table)))

    assert table[0, "a"] == Shift(automaton.target(0, "a"))
    assert table[0, "E"] == Goto(automaton.target(0, "E"))

    s1 = automaton.target(0, "E")
    assert table[s1, END] == Accept()
    assert table[s1, "+"] == Shift(automaton.target(s1, "+"))


def test_expr_is_not_lr0(expr):
    table = build(expr)
    automaton = table.automaton
    s = automaton.target(0, "T")
    t = automaton.target(automaton.target(automaton.target(0, "E"), "+"), "T")

    assert len(table.conflicts) == 2
    assert {(c.state, c.symbol) for c in table.conflicts} == {(s, "*"), (t, "*")}
    assert all(c.kind is ConflictKind.SHIFT_REDUCE for c in table.conflicts)

    # the first action stays in the cell
    assert table[s, "*"] == Shift(automaton.target(s, "*"))
    conflict = next(c for c in table.conflicts if c.state == s)
    assert conflict.actions == (Shift(automaton.target(s, "*")), Reduce(Production("E", ("T",))))
    assert str(conflict).startswith(f"shift/reduce conflict in state {s} on '*'")

    with pytest.raises(ConflictError) as e:
        table.raise_for_conflicts()
    assert e.value.conflicts == table.conflicts


def test_ambiguous_reports_reduce_reduce(ambiguous):
    table = build(ambiguous)
    s = table.automaton.target(0, "a")
    e_a = Reduce(Production("E", ("a",)))
    f_a = Reduce(Production("F", ("a",)))

    rr = [c for c in table.conflicts if c.kind is ConflictKind.REDUCE_REDUCE]
    assert {c.symbol for c in rr} == {"*", "+", "a", "b", END}
    assert all(c.state == s for c in rr)
    assert all(set(c.actions) == {e_a, f_a} for c in rr)
    assert table[s, END] in (e_a, f_a)


def test_empty_production():
    g = Grammar.augmented({"A": ["Aa", "a", ""]}, goal="A", terminals={"a"})
    table = build(g)
    assert table[0, END] == Reduce(Production("A", ()))
    assert [(c.state, c.symbol, c.kind) for c in table.conflicts] == [(0, "a", ConflictKind.SHIFT_REDUCE)]


def test_lr0_grammar_has_no_conflicts(brackets):
    table = build_table(build_automaton(brackets))
    assert not table.has_conflicts
    assert sum(isinstance(a, Accept) for a in table.frame.values.ravel()) == 1


def test_conflicts_are_logged(expr, caplog):
    with caplog.at_level(logging.WARNING, logger="lr0.table"):
        build(expr)
    assert "shift/reduce conflict" in caplog.text


def test_action_str():
    assert str(Shift(3)) == "s3"
    assert str(Goto(3)) == "3"
    assert str(Reduce(Production("E", ("E", "+", "T")))) == "r E → E+T"
    assert str(Accept()) == "acc"
    assert str(ERROR) == ""
