from theta import EvaluatorFn
from theta import SExpression, LispValue
from theta.errors import ThetaMalformedForm
from theta.evaluation.expressions import Expression, If, FALSE
from theta.types.environment import Environment


def _check_if(exp: list[SExpression]) -> None:
    if len(exp) not in (3, 4):
        raise ThetaMalformedForm("if requires a condition, a then-expression and an optional else-expression", exp)


def if_predicate(exp: list[SExpression]) -> SExpression:
    _check_if(exp)
    return exp[1]


def if_consequent(exp: list[SExpression]) -> SExpression:
    _check_if(exp)
    return exp[2]


def if_alternative(exp: list[SExpression]) -> SExpression:
    _check_if(exp)
    return exp[3] if len(exp) == 4 else False


def make_if(predicate: Expression, consequent: Expression, alternative: Expression) -> If:
    return If(predicate, consequent, alternative)


def analyze_if(exp: list[SExpression], analyze_fn) -> If:
    alternative = if_alternative(exp)
    return make_if(
        analyze_fn(if_predicate(exp)),
        analyze_fn(if_consequent(exp)),
        FALSE if alternative is False else analyze_fn(alternative),
    )


def if_form(node: If, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    # Only #f is false: 0, "" and () all select the consequent.
    if evaluate_fn(node.predicate, env) is not False:
        return evaluate_fn(node.consequent, env)
    return evaluate_fn(node.alternative, env)
