from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Self

from lr0.errors import InvalidGrammar, UndefinedSymbol


END = "$"
MATH_NA = "∅"
EPS = "ϵ"

ARROW = "→"


@dataclass(frozen=True, order=True)
class Production:
    lhs: str
    rhs: tuple[str, ...]
    is_start: bool = False

    def __len__(self) -> int:
        return len(self.rhs)

    def is_empty(self) -> bool:
        return len(self.rhs) == 0

    def __str__(self) -> str:
        body = "".join(self.rhs) if self.rhs else EPS
        return f"{self.lhs} {ARROW} {body}"


class Grammar:
    """Context-free grammar over single-character symbols.

    `rules` maps every nonterminal to its productions. A production is either
    a string, where each character is one symbol (`"E+T"`), or any iterable
    of one-character strings. An empty production is written as `""` or `EPS`.

    `start` names the augmented start symbol explicitly. It must own exactly
    one non-empty production, e.g. `S' -> S`. It is the only nonterminal
    allowed to have a longer name, since it is never referenced from a
    right-hand side.

    When `terminals` is given, every right-hand-side symbol must be either a
    nonterminal or one of those terminals, which catches typos. Otherwise the
    terminal alphabet is every right-hand-side symbol that is not a
    nonterminal.
    """

    def __init__(
        self,
        rules: Mapping[str, Iterable[str | Iterable[str]]],
        start: str,
        terminals: Iterable[str] | None = None,
    ):
        if not rules:
            raise InvalidGrammar("Grammar has no rules")
        if start is None or start not in rules:
            raise InvalidGrammar(f"Start symbol {start!r} has no rules", symbol=start)

        self.start = start
        self.nonterminals: tuple[str, ...] = tuple(rules)
        self._rules: dict[str, tuple[Production, ...]] = Grammar.clean_rules(rules, start)

        for nt in self.nonterminals:
            if nt == END:
                raise InvalidGrammar(f"{END!r} is reserved for the end of input", symbol=nt)
            if len(nt) != 1 and nt != start:
                raise InvalidGrammar(f"Nonterminal {nt!r} must be a single character", symbol=nt)
            if not self._rules[nt]:
                raise InvalidGrammar(f"Nonterminal {nt!r} has no productions", symbol=nt)

        start_rules = self._rules[start]
        if len(start_rules) != 1:
            raise InvalidGrammar(
                f"Start symbol {start!r} must have exactly one production, got {len(start_rules)}",
                symbol=start,
            )
        self.start_production: Production = start_rules[0]
        if self.start_production.is_empty():
            raise InvalidGrammar(
                "Start production must derive at least one symbol",
                symbol=start,
                production=self.start_production,
            )

        self.productions: tuple[Production, ...] = tuple(p for nt in self.nonterminals for p in self._rules[nt])

        used = Grammar.select_symbols(self.productions)
        if END in used:
            raise InvalidGrammar(f"{END!r} is reserved for the end of input", symbol=END)
        if start in used:
            raise InvalidGrammar(f"Start symbol {start!r} must not appear in a right-hand side", symbol=start)

        if terminals is None:
            self.terminals = tuple(sorted(used.difference(self.nonterminals)))
        else:
            declared = set(terminals)
            for t in declared:
                if not isinstance(t, str) or len(t) != 1 or t == END:
                    raise InvalidGrammar(f"Terminal {t!r} must be a single character other than {END!r}", symbol=t)
                if t in self._rules:
                    raise InvalidGrammar(f"Symbol {t!r} is declared both terminal and nonterminal", symbol=t)
            for p in self.productions:
                for s in p.rhs:
                    if s not in self._rules and s not in declared:
                        raise UndefinedSymbol(s, p)
            self.terminals = tuple(sorted(declared))

        self.symbols: tuple[str, ...] = tuple(sorted(set(self.terminals) | set(self.nonterminals)))

    @classmethod
    def augmented(
        cls,
        rules: Mapping[str, Iterable[str | Iterable[str]]],
        goal: str,
        terminals: Iterable[str] | None = None,
    ) -> Self:
        """Adds `goal' -> goal` in front of `rules` and uses it as the start."""
        start = goal + "'"
        if start in rules:
            raise InvalidGrammar(f"Grammar already defines {start!r}", symbol=start)
        return cls({start: [goal], **rules}, start=start, terminals=terminals)

    @staticmethod
    def select_symbols(productions: Iterable[Production]) -> set[str]:
        s = set()
        for p in productions:
            for v in p.rhs:
                s.add(v)
        return s

    @staticmethod
    def clean_rules(
        rules: Mapping[str, Iterable[str | Iterable[str]]], start: str
    ) -> dict[str, tuple[Production, ...]]:
        cleaned = {}
        for lhs, alternatives in rules.items():
            if isinstance(alternatives, str):
                # A bare string would otherwise be split into one production per character
                alternatives = [alternatives]
            productions = []
            for rhs in alternatives:
                rhs = tuple(rhs)
                if rhs == (EPS,):
                    rhs = ()
                for s in rhs:
                    if not isinstance(s, str) or len(s) != 1:
                        raise InvalidGrammar(f"Symbol {s!r} of {lhs!r} must be a single character", symbol=s)
                    if s == EPS:
                        raise InvalidGrammar(f"{EPS!r} may only stand alone as an empty production", symbol=s)
                p = Production(lhs=lhs, rhs=rhs, is_start=lhs == start)
                if p not in productions:
                    productions.append(p)
            cleaned[lhs] = tuple(productions)
        return cleaned

    def productions_of(self, nonterminal: str) -> tuple[Production, ...]:
        return self._rules.get(nonterminal, ())

    def is_nonterminal(self, symbol: str) -> bool:
        return symbol in self._rules

    def is_terminal(self, symbol: str) -> bool:
        return symbol in self.terminals

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grammar):
            return NotImplemented
        return (
            self.start == other.start
            and self.terminals == other.terminals
            and set(self.productions) == set(other.productions)
        )

    def __hash__(self):
        return hash((self.start, self.terminals, frozenset(self.productions)))

    def __repr__(self) -> str:
        return f"Grammar(start={self.start!r}, nonterminals={self.nonterminals!r}, terminals={self.terminals!r})"

    def __str__(self) -> str:
        return "\n".join(str(p) for p in self.productions)
