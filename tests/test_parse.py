import pytest
from pratt.cases import CASES
from pratt.parser import parse

@pytest.mark.parametrize("src, expected", CASES)
def test_parse_ok(src, expected):
    assert parse(src) == expected

@pytest.mark.parametrize("src, expected", [
    ("a/b/c", "ab/c/"),
    ("a-b-c", "ab-c-"),
    ("a/b*c", "ab/c*"),
    ("a=b=c=d", "abcd==="),
    ("a=(b=c)", "abc=="),
    ("(a=b)=c", "ab=c="),
    ("a+(b+c)", "abc++"),
    ("~(a+b)", "ab+~"),
    ("~a+b", "a~b+"),
    ("a+b*c-d", "abc*+d-"),
    ("a*b+c*d", "ab*cd*+"),
    ("x=y*~~z+w", "xyz~~*w+="),
    ("((a))", "a"),
    ("A+Z", "AZ+"),
])
def test_parse_more(src, expected):
    assert parse(src) == expected

def test_parse_is_deterministic():
    src = "a=b+c*~(d-e)/f"
    first = parse(src)
    assert all(parse(src) == first for _ in range(5))

def test_parentheses_emit_nothing():
    src = "((a+b))*(c)"
    out = parse(src)
    assert out == "ab+c*"
    assert len(out) == len(src) - src.count("(") - src.count(")")

def test_exact_capacity_fits():
    # three symbols plus the end sentinel
    assert parse("a+b", capacity=4) == "ab+"

def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        parse("a", capacity=0)
