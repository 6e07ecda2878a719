from collections.abc import Iterable, Sequence
from pprint import pformat

import networkx as nx
import pandas as pd
from matplotlib import pyplot as plt

from lr0.automaton import Automaton
from lr0.grammar import END
from lr0.item import Item
from lr0.table import ParseTable


def set2str(cc: Iterable[Item]) -> list[str]:
    return list(sorted(map(str, cc)))


def format_item_set(cc: Iterable[Item]) -> str:
    return pformat(set2str(cc))


def format_states(automaton: Automaton) -> str:
    lines = []
    for i, cc in enumerate(automaton):
        lines.append(f"I{i}:")
        for item in set2str(cc):
            lines.append(f"    {item}")
    return "\n".join(lines)


def table_frame(table: ParseTable, nonterminal_order: Sequence[str] | None = None) -> pd.DataFrame:
    """String rendering of the table, blank cells for errors.

    Columns are the terminals, the end marker, then the nonterminals in
    `nonterminal_order` (the grammar's own order by default).
    """
    grammar = table.grammar
    if nonterminal_order is None:
        nonterminal_order = grammar.nonterminals
    else:
        unknown = [v for v in nonterminal_order if not grammar.is_nonterminal(v)]
        if unknown:
            raise ValueError(f"Not nonterminals of the grammar: {unknown}")
        missing = [v for v in grammar.nonterminals if v not in nonterminal_order]
        nonterminal_order = [*nonterminal_order, *missing]

    columns = [*grammar.terminals, END, *nonterminal_order]
    return table.frame[columns].map(str).rename_axis("State")


def format_table(table: ParseTable, nonterminal_order: Sequence[str] | None = None) -> str:
    return table_frame(table, nonterminal_order).to_string()


def format_conflicts(table: ParseTable) -> str:
    if not table.conflicts:
        return "(no conflicts)"
    return "\n".join(str(c) for c in table.conflicts)


def draw_automaton(automaton: Automaton, ax: plt.Axes | None = None) -> plt.Axes:
    graph = automaton.graph()
    if ax is None:
        _, ax = plt.subplots()

    pos = nx.spring_layout(graph, seed=0)
    nx.draw(graph, pos, ax=ax, arrows=True, node_shape="o", node_size=800, alpha=0.4)
    nx.draw_networkx_labels(graph, pos, ax=ax, labels={i: f"I{i}" for i in graph.nodes})
    nx.draw_networkx_edge_labels(graph, pos, ax=ax, edge_labels=nx.get_edge_attributes(graph, "symbol"))
    return ax
