"""LALR reference grammar for the same expression language.

The grammar is generated from the operator table so both parsers share one
precedence policy. It is used to cross-check ``pratt.parser.parse``.
"""
from typing import NamedTuple, Optional

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedInput

from .errors import ParseError
from .operators import precedence_levels
from .parser import parse


def build_grammar() -> str:
    levels = precedence_levels()
    rules = ["?start: level0"]
    terminals = []
    for i, ops in enumerate(levels):
        here = f"level{i}"
        below = f"level{i + 1}" if i + 1 < len(levels) else "unary"
        term = f"OP{i}"
        terminals.append(f"{term}: " + " | ".join(f'"{op.symbol}"' for op in ops))
        # one associativity per level
        if ops[0].right_associative:
            rules.append(f"?{here}: {below} {term} {here} -> binop\n      | {below}")
        else:
            rules.append(f"?{here}: {here} {term} {below} -> binop\n      | {below}")
    rules.append('?unary: "~" unary -> neg\n      | atom')
    rules.append('?atom: VAR -> var\n     | "(" level0 ")"')
    terminals.append("VAR: /[A-Za-z]/")
    return "\n".join(rules + terminals) + "\n"


GRAMMAR = build_grammar()

parser = Lark(GRAMMAR, start="start", parser="lalr")


@v_args(inline=True)
class PostfixBuilder(Transformer):
    def var(self, tok): return str(tok)

    def neg(self, operand): return operand + "~"

    def binop(self, left, op, right): return left + right + str(op)


def reference_parse(source: str) -> str:
    try:
        tree = parser.parse(source)
    except UnexpectedInput as e:
        raise ParseError(f"reference grammar rejected input ({type(e).__name__})",
                         getattr(e, "pos_in_stream", None)) from e
    try:
        return PostfixBuilder().transform(tree)
    except RecursionError:
        raise ParseError("expression nested too deeply") from None


class Comparison(NamedTuple):
    source: str
    postfix: Optional[str]    # None when rejected
    reference: Optional[str]

    @property
    def ok(self) -> bool:
        return self.postfix == self.reference


def check_against_reference(source: str) -> Comparison:
    # output never outgrows input, so this capacity cannot overflow
    try:
        postfix = parse(source, capacity=len(source) + 1)
    except ParseError:
        postfix = None
    try:
        reference = reference_parse(source)
    except ParseError:
        reference = None
    return Comparison(source, postfix, reference)
