import logging
from collections import deque
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

import networkx as nx
import pandas as pd

from lr0.errors import ItemIdentityCollision
from lr0.grammar import MATH_NA, Grammar
from lr0.item import Item, ItemSet

logger = logging.getLogger(__name__)


def generate_items(grammar: Grammar) -> list[Item]:
    """Lists every LR(0) item of the grammar, production by production."""
    items = []
    seen = set()
    for p in grammar.productions:
        for dot_pos in range(len(p) + 1):
            item = Item(production=p, dot_pos=dot_pos)
            if item in seen:
                raise ItemIdentityCollision(f"Item `{item}` is not distinguishable from another item")
            seen.add(item)
            items.append(item)
    return items


def closure(grammar: Grammar, s: Item | Iterable[Item]) -> ItemSet:
    if isinstance(s, Item):
        s = [s]
    result = set(s)
    to_process = list(result)

    while to_process:
        # A -> b • C d
        item = to_process.pop()
        c = item.next_symbol()
        if c is None or not grammar.is_nonterminal(c):
            continue
        for p in grammar.productions_of(c):
            new_item = Item.from_production(p)
            if new_item not in result:
                result.add(new_item)
                to_process.append(new_item)
    return ItemSet(result)


def goto(grammar: Grammar, s: Iterable[Item], x: str) -> ItemSet:
    t = set()

    for item in s:
        if item.next_symbol() == x:
            t.add(item.advance())

    if not t:
        return ItemSet()
    return closure(grammar, t)


class Automaton:
    """Canonical collection of LR(0) item sets and the transitions between them.

    States are numbered in discovery order, state 0 being the closure of the
    start item. Both `states` and `transitions` are read-only.
    """

    def __init__(self, grammar: Grammar, states: Iterable[ItemSet], transitions: Mapping[tuple[int, str], int]):
        self.grammar = grammar
        self.states: tuple[ItemSet, ...] = tuple(states)
        self.transitions: Mapping[tuple[int, str], int] = MappingProxyType(dict(transitions))
        self._index = {state: i for i, state in enumerate(self.states)}

    def __len__(self) -> int:
        return len(self.states)

    def __getitem__(self, i: int) -> ItemSet:
        return self.states[i]

    def __iter__(self) -> Iterator[ItemSet]:
        return iter(self.states)

    def index(self, items: ItemSet) -> int:
        return self._index[items]

    def target(self, state: int, symbol: str) -> int | None:
        return self.transitions.get((state, symbol))

    def edges(self) -> list[tuple[int, str, int]]:
        return sorted((i, x, j) for (i, x), j in self.transitions.items())

    def graph(self) -> nx.DiGraph:
        # Every state is entered by a single symbol, so no two edges share endpoints
        graph = nx.DiGraph()
        for i, state in enumerate(self.states):
            graph.add_node(i, items=state)
        for i, x, j in self.edges():
            graph.add_edge(i, j, symbol=x)
        return graph

    def trace(self) -> pd.DataFrame:
        """Transition table: one row per state, one column per symbol."""
        symbols = list(self.grammar.symbols)
        records = []
        for i in range(len(self.states)):
            record = {v: MATH_NA for v in symbols}
            record["From"] = i
            records.append(record)
        for (i, x), j in self.transitions.items():
            records[i][x] = j

        df = pd.DataFrame.from_records(records, columns=["From", *symbols])
        df = df.set_index("From")
        return df

    def __repr__(self):
        return f"Automaton(states={len(self.states)}, transitions={len(self.transitions)})"


def build_automaton(grammar: Grammar) -> Automaton:
    start = Item.from_production(grammar.start_production)
    states = [closure(grammar, start)]
    check_set = {states[0]: 0}
    transitions = {}

    to_process = deque([0])
    while to_process:
        i = to_process.popleft()
        cci = states[i]

        for x in grammar.symbols:
            t = goto(grammar, cci, x)
            if not t:
                continue
            j = check_set.get(t)
            if j is None:
                j = len(states)
                states.append(t)
                check_set[t] = j
                to_process.append(j)
                logger.debug("State %d = goto(%d, %r): %s", j, i, x, t)
            transitions[(i, x)] = j

    logger.debug("Built %d states and %d transitions", len(states), len(transitions))
    return Automaton(grammar, states, transitions)
