import logging
from dataclasses import dataclass
from enum import Enum

import pandas as pd

from lr0.automaton import Automaton, build_automaton
from lr0.errors import ConflictError
from lr0.grammar import END, Grammar, Production

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Shift:
    state: int

    def __str__(self):
        return f"s{self.state}"


@dataclass(frozen=True)
class Goto:
    state: int

    def __str__(self):
        return str(self.state)


@dataclass(frozen=True)
class Reduce:
    production: Production

    @property
    def lhs(self) -> str:
        return self.production.lhs

    def __str__(self):
        return f"r {self.production}"


@dataclass(frozen=True)
class Accept:

    def __str__(self):
        return "acc"


@dataclass(frozen=True)
class Error:

    def __str__(self):
        return ""


ERROR = Error()

Action = Shift | Goto | Reduce | Accept | Error


class ConflictKind(Enum):
    SHIFT_REDUCE = "shift/reduce"
    REDUCE_REDUCE = "reduce/reduce"


@dataclass(frozen=True)
class Conflict:
    state: int
    symbol: str
    kind: ConflictKind
    actions: tuple[Action, ...]

    def __str__(self) -> str:
        alternatives = " vs ".join(f"`{a}`" for a in self.actions)
        return f"{self.kind.value} conflict in state {self.state} on {self.symbol!r}: {alternatives}"


class ParseTable:
    """ACTION and GOTO parts of an LR(0) table in a single frame.

    Rows are states, columns are the terminals, the end marker and then the
    nonterminals. Every cell holds exactly one action; empty cells hold
    `ERROR`. Conflicting actions never overwrite a cell, they are collected in
    `conflicts` instead.
    """

    def __init__(self, automaton: Automaton, frame: pd.DataFrame, conflicts: list[Conflict]):
        self.automaton = automaton
        self.frame = frame
        self.conflicts: tuple[Conflict, ...] = tuple(conflicts)

    @property
    def grammar(self) -> Grammar:
        return self.automaton.grammar

    @property
    def columns(self) -> list[str]:
        return list(self.frame.columns)

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)

    def __len__(self) -> int:
        return len(self.frame.index)

    def __getitem__(self, key: tuple[int, str]) -> Action:
        state, symbol = key
        return self.frame.at[state, symbol]

    def actions(self, state: int) -> dict[str, Action]:
        row = self.frame.loc[state]
        return {col: a for col, a in row.items() if a != ERROR}

    def raise_for_conflicts(self) -> None:
        if self.conflicts:
            raise ConflictError(self.conflicts)

    def __repr__(self):
        return f"ParseTable(states={len(self)}, conflicts={len(self.conflicts)})"


def build_table(automaton: Automaton) -> ParseTable:
    grammar = automaton.grammar
    columns = [*grammar.terminals, END, *grammar.nonterminals]
    frame = pd.DataFrame(
        [[ERROR] * len(columns) for _ in range(len(automaton))],
        index=range(len(automaton)),
        columns=columns,
        dtype=object,
    )
    conflicts = []

    def put(i: int, column: str, action: Action):
        current = frame.at[i, column]
        if current == ERROR:
            frame.at[i, column] = action
        elif current != action:
            if isinstance(current, Shift) or isinstance(action, Shift):
                kind = ConflictKind.SHIFT_REDUCE
            else:
                kind = ConflictKind.REDUCE_REDUCE
            conflict = Conflict(state=i, symbol=column, kind=kind, actions=(current, action))
            logger.warning("%s", conflict)
            conflicts.append(conflict)

    for i, x, j in automaton.edges():
        if grammar.is_nonterminal(x):
            put(i, x, Goto(j))
        else:
            put(i, x, Shift(j))

    for i, cc in enumerate(automaton):
        for item in cc.complete_items():
            if item.production.is_start:
                put(i, END, Accept())
            else:
                # No lookahead in LR(0): reduce whatever comes next
                for a in (*grammar.terminals, END):
                    put(i, a, Reduce(item.production))

    return ParseTable(automaton, frame, conflicts)


def build(grammar: Grammar) -> ParseTable:
    return build_table(build_automaton(grammar))
