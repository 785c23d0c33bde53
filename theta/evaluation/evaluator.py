"""Core evaluator for the Theta interpreter.

`evaluate` accepts either a raw form (analyzed on entry) or an expression
node, and dispatches on the node type: literals and variables directly,
special forms through the SPECIAL_FORMS table, and everything else as an
application of an evaluated operator to left-to-right evaluated operands.
"""

from __future__ import annotations

from typing import Sequence as Seq

from theta import SExpression, LispValue
from theta.errors import ThetaUnknownExpression
from theta.evaluation.analyzer import analyze
from theta.evaluation.apply import apply
from theta.evaluation.expressions import Application, Expression, Literal, Variable
from theta.evaluation.special_forms import SPECIAL_FORMS
from theta.evaluation.special_forms.progn_form import evaluate_body
from theta.types.environment import Environment


def evaluate(expr: SExpression | Expression, env: Environment) -> LispValue:
    """Evaluate one expression in `env` and return its value."""
    if not isinstance(expr, Expression):
        expr = analyze(expr)

    match expr:
        case Literal(value=value):
            return value
        case Variable(name=name):
            return env.lookup(name)
        case Application(operator=operator, operands=operands):
            procedure = evaluate(operator, env)
            args = eval_operands(operands, env)
            return apply(procedure, args)

    handler = SPECIAL_FORMS.get(type(expr))
    if handler is None:
        raise ThetaUnknownExpression(f"Unknown expression type: {expr!r}", expr)
    return handler(expr, env, evaluate)


def eval_sequence(exprs: Seq[SExpression | Expression], env: Environment) -> LispValue:
    """Evaluate a non-empty body in order; the last value is the result."""
    return evaluate_body(exprs, env, evaluate)


def eval_operands(exprs: Seq[SExpression | Expression], env: Environment) -> list[LispValue]:
    """Evaluate operands strictly left to right."""
    args: list[LispValue] = []
    for e in exprs:
        args.append(evaluate(e, env))
    return args
