from typing import NamedTuple


class Case(NamedTuple):
    source: str
    expected: str


CASES = [
    Case("a", "a"),
    Case("~a", "a~"),
    Case("~~a", "a~~"),
    Case("a+b", "ab+"),
    Case("a*b", "ab*"),
    Case("a*~b", "ab~*"),
    Case("a+b+c", "ab+c+"),
    Case("a+b-c", "ab+c-"),
    Case("a-b+c", "ab-c+"),
    Case("a*b*c", "ab*c*"),
    Case("a=b=c", "abc=="),
    Case("a+b*c", "abc*+"),
    Case("(a+b)*c", "ab+c*"),
    Case("a*b+c", "ab*c+"),
    Case("a=b+c", "abc+="),
]
