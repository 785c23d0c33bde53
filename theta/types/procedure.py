"""Procedure values for Theta: host-native primitives and compound closures."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Callable

from theta import LispValue
from theta.types.environment import Environment
from theta.types.symbol import Symbol

if TYPE_CHECKING:
    from theta.evaluation.expressions import Expression


class Procedure:
    """Common base for everything the applier accepts."""

    __slots__ = ()


class Primitive(Procedure):
    """A procedure backed by a Python callable, invoked as fn(*args)."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[..., LispValue]):
        self.name = name
        self.fn = fn

    def __str__(self) -> str:
        return f"#<procedure {self.name}>"

    def __repr__(self) -> str:
        return f"Primitive({self.name!r})"


class Compound(Procedure):
    """A first-class lambda with formal parameters, body, and closure env.

    `env` is the environment in which the lambda expression was evaluated,
    held by reference. Applying the procedure extends `env`, never the
    environment of the caller.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: list[Expression], env: Environment):
        self.params: list[Symbol] = list(params)
        self.body: list[Expression] = list(body)
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<lambda (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
