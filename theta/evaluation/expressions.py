"""Tagged expression nodes built once from raw forms by the analyzer.

Each recognized form gets its own frozen dataclass, so the evaluator
dispatches on node type instead of re-testing list shapes on every call.
Sub-expressions are themselves nodes; quoted data stays raw.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from theta import LispValue, SExpression
from theta.types.symbol import Symbol


class ElseMarker:
    """Stands in for the predicate of a cond `else` clause."""

    _instance: ElseMarker | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "ELSE"


ELSE = ElseMarker()


class Expression:
    """Base for every analyzed node."""

    __slots__ = ()


@dataclass(frozen=True)
class Literal(Expression):
    value: LispValue


@dataclass(frozen=True)
class Variable(Expression):
    name: Symbol


@dataclass(frozen=True)
class Quote(Expression):
    datum: SExpression


@dataclass(frozen=True)
class Assignment(Expression):
    target: Symbol
    value: Expression


@dataclass(frozen=True)
class Definition(Expression):
    target: Symbol
    value: Expression


@dataclass(frozen=True)
class If(Expression):
    predicate: Expression
    consequent: Expression
    alternative: Expression


@dataclass(frozen=True)
class LambdaExpr(Expression):
    params: tuple[Symbol, ...]
    body: tuple[Expression, ...]


@dataclass(frozen=True)
class Sequence(Expression):
    body: tuple[Expression, ...]


@dataclass(frozen=True)
class Clause:
    predicate: Union[Expression, ElseMarker]
    actions: tuple[Expression, ...]

    @property
    def is_else(self) -> bool:
        return self.predicate is ELSE


@dataclass(frozen=True)
class Cond(Expression):
    clauses: tuple[Clause, ...]


@dataclass(frozen=True)
class Application(Expression):
    operator: Expression
    operands: tuple[Expression, ...]


# An `if` without an alternative, an empty cond clause, and an exhausted cond
# all produce this.
FALSE = Literal(False)
