class GrammarError(Exception):
    pass


class InvalidGrammar(GrammarError):

    def __init__(self, message: str, symbol: str | None = None, production=None):
        super().__init__(message)
        self.symbol = symbol
        self.production = production


class UndefinedSymbol(GrammarError):

    def __init__(self, symbol: str, production):
        super().__init__(f"Symbol {symbol!r} in `{production}` is neither a nonterminal nor a declared terminal")
        self.symbol = symbol
        self.production = production


class ItemIdentityCollision(GrammarError):
    pass


class ConflictError(GrammarError):

    def __init__(self, conflicts):
        lines = "\n".join(str(c) for c in conflicts)
        super().__init__(f"{len(conflicts)} conflict(s) in LR(0) table:\n{lines}")
        self.conflicts = tuple(conflicts)
