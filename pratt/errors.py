from typing import Optional


def describe(symbol: str) -> str:
    """Render a symbol for error messages; the end marker is the empty string."""
    if not symbol:
        return "end of input"
    return f"'{symbol}'" if symbol.isprintable() else repr(symbol)


class ParseError(Exception):
    kind = "syntax"

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self):
        if self.position is None:
            return f"{self.kind} error: {self.message}"
        return f"{self.kind} error at {self.position}: {self.message}"


class UnexpectedToken(ParseError):
    def __init__(self, symbol: str, position: Optional[int] = None):
        if symbol:
            shown = symbol if symbol.isprintable() else repr(symbol)
            message = f"unexpected character: {shown}"
        else:
            message = "unexpected end of input"
        super().__init__(message, position)
        self.symbol = symbol


class TokenMismatch(ParseError):
    def __init__(self, expected: str, got: str, position: Optional[int] = None):
        super().__init__(f"expected {describe(expected)}, got {describe(got)}", position)
        self.expected = expected
        self.got = got


class OutputOverflow(ParseError):
    kind = "capacity"

    def __init__(self, capacity: int, position: Optional[int] = None):
        super().__init__(f"output overflow (capacity {capacity})", position)
        self.capacity = capacity
