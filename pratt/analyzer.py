from collections import Counter
from dataclasses import dataclass, field
from typing import Set

from .operators import UNARY_OPERATOR, is_variable, operator_info


@dataclass
class Analysis:
    variables: Set[str] = field(default_factory=set)
    operators: Counter = field(default_factory=Counter)
    depth: int = 0          # max operand stack depth while evaluating
    remaining: int = 0      # values left on the stack at the end


def analyze(postfix: str) -> Analysis:
    """Simulate a postfix evaluation, tracking stack depth only."""
    an = Analysis()
    stack = 0
    for i, ch in enumerate(postfix):
        if is_variable(ch):
            an.variables.add(ch)
            stack += 1
        elif ch == UNARY_OPERATOR:
            if stack < 1:
                raise ValueError(f"'{ch}' at {i} has no operand")
            an.operators[ch] += 1
        elif operator_info(ch) is not None:
            if stack < 2:
                raise ValueError(f"'{ch}' at {i} needs two operands, found {stack}")
            an.operators[ch] += 1
            stack -= 1
        else:
            raise ValueError(f"unknown symbol {ch!r} at {i}")
        an.depth = max(an.depth, stack)
    an.remaining = stack
    return an


def check_postfix(postfix: str) -> Analysis:
    """Raise ValueError unless ``postfix`` reduces to exactly one value."""
    an = analyze(postfix)
    if an.remaining != 1:
        raise ValueError(f"postfix leaves {an.remaining} values on the stack")
    return an
