"""Structural classification of raw forms.

Predicates are tried in a fixed priority order. Application carries no tag
of its own (it is "any other non-empty list"), so it must come last, after
every tagged form has been ruled out.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from theta import SExpression
from theta.errors import ThetaUnknownExpression
from theta.types.symbol import Symbol


class Category(Enum):
    LITERAL = "literal"
    VARIABLE = "variable"
    QUOTE = "quote"
    ASSIGNMENT = "assignment"
    DEFINITION = "definition"
    IF = "if"
    LAMBDA = "lambda"
    SEQUENCE = "sequence"
    COND = "cond"
    APPLICATION = "application"


QUOTE = Symbol("quote")
SET = Symbol("set!")
DEFINE = Symbol("define")
IF = Symbol("if")
LAMBDA = Symbol("lambda")
PROGN = Symbol("progn")
BEGIN = Symbol("begin")
COND = Symbol("cond")
ELSE = Symbol("else")


def is_literal(exp: SExpression) -> bool:
    # bool is a subclass of int, so booleans land here too
    return isinstance(exp, (int, float, str))


def is_variable(exp: SExpression) -> bool:
    return isinstance(exp, Symbol)


def is_compound(exp: SExpression) -> bool:
    return isinstance(exp, list) and len(exp) > 0


def is_tagged(exp: SExpression, *tags: Symbol) -> bool:
    return is_compound(exp) and exp[0] in tags


def is_quote(exp: SExpression) -> bool:
    return is_tagged(exp, QUOTE)


def is_assignment(exp: SExpression) -> bool:
    return is_tagged(exp, SET)


def is_definition(exp: SExpression) -> bool:
    return is_tagged(exp, DEFINE)


def is_if(exp: SExpression) -> bool:
    return is_tagged(exp, IF)


def is_lambda(exp: SExpression) -> bool:
    return is_tagged(exp, LAMBDA)


def is_sequence(exp: SExpression) -> bool:
    return is_tagged(exp, PROGN, BEGIN)


def is_cond(exp: SExpression) -> bool:
    return is_tagged(exp, COND)


def is_application(exp: SExpression) -> bool:
    return is_compound(exp)


# Order matters: see module docstring.
CLASSIFIERS: tuple[tuple[Category, Callable[[SExpression], bool]], ...] = (
    (Category.LITERAL, is_literal),
    (Category.VARIABLE, is_variable),
    (Category.QUOTE, is_quote),
    (Category.ASSIGNMENT, is_assignment),
    (Category.DEFINITION, is_definition),
    (Category.IF, is_if),
    (Category.LAMBDA, is_lambda),
    (Category.SEQUENCE, is_sequence),
    (Category.COND, is_cond),
    (Category.APPLICATION, is_application),
)


def classify(exp: SExpression) -> Category:
    """Return the category of `exp`.

    Raises ThetaUnknownExpression for anything that is not a literal, a
    symbol, or a non-empty list.
    """
    for category, predicate in CLASSIFIERS:
        if predicate(exp):
            return category
    raise ThetaUnknownExpression(f"Unknown expression type: {exp!r}", exp)
