"""Infix to postfix conversion with a Pratt (precedence climbing) parser."""
from .errors import ParseError, UnexpectedToken, TokenMismatch, OutputOverflow
from .operators import Operator, OPERATORS, operator_info
from .parser import parse

__all__ = [
    'parse', 'ParseError', 'UnexpectedToken', 'TokenMismatch', 'OutputOverflow',
    'Operator', 'OPERATORS', 'operator_info',
]
