from theta import EvaluatorFn
from theta import SExpression, LispValue
from theta.errors import ThetaEmptyBody, ThetaMalformedForm
from theta.evaluation.expressions import Definition
from theta.evaluation.special_forms.lambda_form import check_params, make_lambda
from theta.types.environment import Environment
from theta.types.symbol import Symbol
from theta.types.unspecified import Unspecified


def _is_shorthand(exp: list[SExpression]) -> bool:
    # (define (name param...) body...)
    return len(exp) >= 2 and isinstance(exp[1], list)


def definition_target(exp: list[SExpression]) -> Symbol:
    if len(exp) < 2:
        raise ThetaMalformedForm("define requires a name", exp)
    if _is_shorthand(exp):
        header = exp[1]
        if not header or not isinstance(header[0], Symbol):
            raise ThetaMalformedForm("define requires a procedure name", exp)
        return header[0]
    if not isinstance(exp[1], Symbol):
        raise ThetaMalformedForm(f"Cannot define {exp[1]!r} as a symbol", exp)
    return exp[1]


def definition_value(exp: list[SExpression]) -> SExpression:
    """
    (define name value)            -> value
    (define (name p...) body...)   -> (lambda (p...) body...)
    """
    if _is_shorthand(exp):
        definition_target(exp)
        params = check_params(exp[1][1:], exp)
        body = exp[2:]
        if not body:
            raise ThetaEmptyBody("define requires at least one body expression", exp)
        return make_lambda(params, body)
    if len(exp) != 3:
        raise ThetaMalformedForm("define requires exactly 2 arguments", exp)
    return exp[2]


def analyze_define(exp: list[SExpression], analyze_fn) -> Definition:
    return Definition(definition_target(exp), analyze_fn(definition_value(exp)))


def define_form(node: Definition, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    value = evaluate_fn(node.value, env)
    env.define(node.target, value)
    return Unspecified
