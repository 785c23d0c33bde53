from typing import Sequence as Seq

from theta import EvaluatorFn
from theta import SExpression, LispValue
from theta.errors import ThetaEmptyBody
from theta.evaluation.expressions import Expression, Sequence
from theta.types.environment import Environment


def sequence_body(exp: list[SExpression]) -> list[SExpression]:
    body = exp[1:]
    if not body:
        raise ThetaEmptyBody(f"{exp[0]} requires at least one expression", exp)
    return body


def analyze_progn(exp: list[SExpression], analyze_fn) -> Sequence:
    return Sequence(tuple(analyze_fn(e) for e in sequence_body(exp)))


def evaluate_body(exprs: Seq[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate `exprs` in order for effect and return the value of the last."""
    if not exprs:
        raise ThetaEmptyBody("Cannot evaluate an empty sequence", list(exprs))
    for e in exprs[:-1]:
        evaluate_fn(e, env)
    return evaluate_fn(exprs[-1], env)


def progn_form(node: Sequence, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    return evaluate_body(node.body, env, evaluate_fn)
