"""Prints the LR(0) automaton and table of one of the bundled grammars.

Usage: python -m lr0 [NAME] [--draw] [-v]
"""

import logging
import sys

from matplotlib import pyplot as plt

from lr0.automaton import build_automaton
from lr0.grammar import Grammar
from lr0.report import draw_automaton, format_conflicts, format_states, format_table
from lr0.table import build_table

single = Grammar({"S'": ["S"], "S": ["a"]}, start="S'")

expr = Grammar.augmented(
    {
        "E": ["E+T", "T"],
        "T": ["T*F", "F"],
        "F": ["a", "b"],
    },
    goal="E",
)

# T -> TE and F -> F* make this one far from LR(0)
original = Grammar.augmented(
    {
        "E": ["E+T", "T"],
        "T": ["TE", "F"],
        "F": ["F*", "a", "b"],
    },
    goal="E",
)

ambiguous = Grammar.augmented(
    {
        "E": ["E+T", "T", "a"],
        "T": ["T*F", "F"],
        "F": ["a", "b"],
    },
    goal="E",
)

brackets = Grammar.augmented(
    {
        "L": ["LP", "P"],
        "P": ["(L)", "()"],
    },
    goal="L",
    terminals={"(", ")"},
)

empty = Grammar.augmented(
    {
        "A": ["Aa", "a", ""],
    },
    goal="A",
    terminals={"a"},
)

GRAMMARS = {
    "single": single,
    "expr": expr,
    "original": original,
    "ambiguous": ambiguous,
    "brackets": brackets,
    "empty": empty,
}


def usage() -> str:
    return f"usage: python -m lr0 [{'|'.join(GRAMMARS)}] [--draw] [-v]"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    draw = "--draw" in args
    verbose = "-v" in args
    names = [a for a in args if a not in ("--draw", "-v")]

    if len(names) > 1 or (names and names[0] not in GRAMMARS):
        print(usage(), file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    grammar = GRAMMARS[names[0] if names else "expr"]
    automaton = build_automaton(grammar)
    table = build_table(automaton)

    print(grammar)
    print()
    print(format_states(automaton))
    print()
    print(automaton.trace().to_string())
    print()
    print(format_table(table))
    print()
    print(format_conflicts(table))

    if draw:
        draw_automaton(automaton)
        plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
