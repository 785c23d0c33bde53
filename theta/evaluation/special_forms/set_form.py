from theta import EvaluatorFn
from theta import SExpression, LispValue
from theta.errors import ThetaMalformedForm
from theta.evaluation.expressions import Assignment
from theta.types.environment import Environment
from theta.types.symbol import Symbol
from theta.types.unspecified import Unspecified


def _check_set(exp: list[SExpression]) -> None:
    if len(exp) != 3:
        raise ThetaMalformedForm("set! requires exactly 2 arguments: (set! var value)", exp)
    if not isinstance(exp[1], Symbol):
        raise ThetaMalformedForm(f"set! first argument must be a Symbol, got {exp[1]!r}", exp)


def assignment_target(exp: list[SExpression]) -> Symbol:
    _check_set(exp)
    return exp[1]


def assignment_value(exp: list[SExpression]) -> SExpression:
    _check_set(exp)
    return exp[2]


def analyze_set(exp: list[SExpression], analyze_fn) -> Assignment:
    return Assignment(assignment_target(exp), analyze_fn(assignment_value(exp)))


def set_form(node: Assignment, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    # The binding must already exist somewhere in the chain; env.set raises otherwise.
    value = evaluate_fn(node.value, env)
    env.set(node.target, value)
    return Unspecified
