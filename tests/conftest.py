import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from lr0.grammar import Grammar


@pytest.fixture
def single():
    return Grammar({"S'": ["S"], "S": ["a"]}, start="S'")


@pytest.fixture
def expr():
    return Grammar.augmented(
        {
            "E": ["E+T", "T"],
            "T": ["T*F", "F"],
            "F": ["a", "b"],
        },
        goal="E",
    )


@pytest.fixture
def ambiguous():
    return Grammar.augmented(
        {
            "E": ["E+T", "T", "a"],
            "T": ["T*F", "F"],
            "F": ["a", "b"],
        },
        goal="E",
    )


@pytest.fixture
def brackets():
    return Grammar.augmented(
        {
            "L": ["LP", "P"],
            "P": ["(L)", "()"],
        },
        goal="L",
        terminals={"(", ")"},
    )
