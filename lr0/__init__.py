from lr0.automaton import Automaton, build_automaton, closure, generate_items, goto
from lr0.errors import ConflictError, GrammarError, InvalidGrammar, ItemIdentityCollision, UndefinedSymbol
from lr0.grammar import END, EPS, Grammar, Production
from lr0.item import Item, ItemSet
from lr0.table import (
    ERROR,
    Accept,
    Action,
    Conflict,
    ConflictKind,
    Error,
    Goto,
    ParseTable,
    Reduce,
    Shift,
    build,
    build_table,
)

__all__ = [
    "END",
    "EPS",
    "ERROR",
    "Accept",
    "Action",
    "Automaton",
    "Conflict",
    "ConflictError",
    "ConflictKind",
    "Error",
    "Goto",
    "Grammar",
    "GrammarError",
    "InvalidGrammar",
    "Item",
    "ItemIdentityCollision",
    "ItemSet",
    "ParseTable",
    "Production",
    "Reduce",
    "Shift",
    "UndefinedSymbol",
    "build",
    "build_automaton",
    "build_table",
    "closure",
    "generate_items",
    "goto",
]
