import pytest
from pratt.analyzer import analyze, check_postfix
from pratt.cases import CASES
from pratt.parser import parse

@pytest.mark.parametrize("src", [c.source for c in CASES] + ["a=~(b+c)*d/e-f"])
def test_parser_output_preserves_arity(src):
    an = check_postfix(parse(src))
    assert an.remaining == 1

def test_analysis_counts():
    an = analyze("abc*+d=")
    assert an.variables == {"a", "b", "c", "d"}
    assert an.operators == {"*": 1, "+": 1, "=": 1}
    assert an.depth == 3

@pytest.mark.parametrize("postfix", ["+", "a+", "~", "ab", "", "a1"])
def test_check_rejects_malformed(postfix):
    with pytest.raises(ValueError):
        check_postfix(postfix)
