"""Infix to postfix conversion by precedence climbing.

Tokens are single characters and no whitespace is allowed between them:

    program   -> expr END
    expr      -> primary | expr binary_op expr
    primary   -> variable | unary_op primary | '(' expr ')'
    variable  -> 'A'..'Z' | 'a'..'z'
    binary_op -> '+' | '-' | '*' | '/' | '='
    unary_op  -> '~'

The two recursive procedures are ``Parser.parse_primary`` and
``Parser.parse_expr``; all precedence and associativity decisions come from
``pratt.operators.OPERATORS``.
"""
import logging
from typing import List, Optional

from .config import PARSER_CONFIG
from .errors import OutputOverflow, ParseError, TokenMismatch, UnexpectedToken
from .operators import CLOSE_GROUP, OPEN_GROUP, UNARY_OPERATOR, is_variable, operator_info

logger = logging.getLogger(__name__)

END = PARSER_CONFIG["end_marker"]


class Cursor:
    """Left-to-right position over an immutable source string."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def peek(self) -> str:
        if self.pos < len(self.source):
            return self.source[self.pos]
        return END

    def next(self) -> str:
        ch = self.peek()
        if ch != END:
            self.pos += 1
        return ch

    def expect(self, expected: str):
        pos = self.pos
        got = self.next()
        if got != expected:
            raise TokenMismatch(expected, got, pos)


class OutputBuffer:
    """Bounded, append-only output. The end sentinel takes one slot."""

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._symbols: List[str] = []

    def __len__(self):
        return len(self._symbols)

    def emit(self, symbol: str, position: Optional[int] = None):
        # reserve the last slot for the end sentinel
        if len(self._symbols) >= self.capacity - 1:
            raise OutputOverflow(self.capacity, position)
        self._symbols.append(symbol)

    def getvalue(self) -> str:
        return "".join(self._symbols)


class Parser:
    def __init__(self, source: str, capacity: int):
        self.cursor = Cursor(source)
        self.output = OutputBuffer(capacity)

    def emit(self, symbol: str):
        self.output.emit(symbol, self.cursor.pos)

    def parse_primary(self):
        pos = self.cursor.pos
        ch = self.cursor.next()
        if ch == UNARY_OPERATOR:
            self.parse_primary()
            self.emit(ch)
        elif ch == OPEN_GROUP:
            self.parse_expr(0)
            self.cursor.expect(CLOSE_GROUP)
        elif is_variable(ch):
            self.emit(ch)
        else:
            raise UnexpectedToken(ch, pos)

    def parse_expr(self, floor: int):
        self.parse_primary()
        while True:
            ch = self.cursor.peek()
            op = operator_info(ch)
            if op is None or floor >= op.precedence:
                return
            self.cursor.next()
            self.parse_expr(op.floor)
            self.emit(ch)

    def parse_program(self) -> str:
        self.parse_expr(0)
        self.cursor.expect(END)
        return self.output.getvalue()


def parse(source: str, capacity: Optional[int] = None) -> str:
    """Convert ``source`` to postfix. Raises a ``ParseError`` subclass on bad input."""
    if capacity is None:
        capacity = PARSER_CONFIG["max_output"]
    parser = Parser(source, capacity)
    try:
        out = parser.parse_program()
    except RecursionError:
        raise ParseError("expression nested too deeply", parser.cursor.pos) from None
    except ParseError as e:
        logger.debug("parse(%r) failed: %s", source, e)
        raise
    logger.debug("parse(%r) = %r", source, out)
    return out
