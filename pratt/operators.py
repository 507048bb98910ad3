from types import MappingProxyType
from typing import Dict, List, NamedTuple, Optional

UNARY_OPERATOR = "~"
OPEN_GROUP = "("
CLOSE_GROUP = ")"


class Operator(NamedTuple):
    symbol: str
    precedence: int
    right_associative: bool
    doc: str

    @property
    def floor(self) -> int:
        """Precedence floor for parsing this operator's right operand."""
        return self.precedence - 1 if self.right_associative else self.precedence


# Precedences must leave gaps between classes: a right associative operator
# parses its right operand with its own precedence minus one.
ASSIGNMENT = 1
ADDITIVE = 10
MULTIPLICATIVE = 20

_TABLE: Dict[str, Operator] = {}

def _define(symbol, precedence, right_associative=False, doc=""):
    _TABLE[symbol] = Operator(symbol, precedence, right_associative, doc)

_define("=", ASSIGNMENT, right_associative=True, doc="assignment")
_define("+", ADDITIVE, doc="addition")
_define("-", ADDITIVE, doc="subtraction")
_define("*", MULTIPLICATIVE, doc="multiplication")
_define("/", MULTIPLICATIVE, doc="division")

OPERATORS = MappingProxyType(_TABLE)


def operator_info(symbol: str) -> Optional[Operator]:
    return OPERATORS.get(symbol)

def is_variable(symbol: str) -> bool:
    return len(symbol) == 1 and symbol.isascii() and symbol.isalpha()

def precedence_levels() -> List[List[Operator]]:
    """Binary operators grouped by precedence, loosest binding first."""
    levels: Dict[int, List[Operator]] = {}
    for op in OPERATORS.values():
        levels.setdefault(op.precedence, []).append(op)
    return [levels[p] for p in sorted(levels)]

def list_operators():
    out = []
    for sym, op in sorted(OPERATORS.items(), key=lambda kv: (kv[1].precedence, kv[0])):
        out.append({
            "symbol": sym,
            "precedence": op.precedence,
            "associativity": "right" if op.right_associative else "left",
            "doc": op.doc,
        })
    out.append({"symbol": UNARY_OPERATOR, "precedence": None,
                "associativity": "prefix", "doc": "unary prefix, binds tighter than any binary operator"})
    return out
