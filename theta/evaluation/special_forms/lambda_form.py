from theta import EvaluatorFn
from theta import SExpression, LispValue
from theta.errors import ThetaEmptyBody, ThetaMalformedForm
from theta.evaluation.classifier import LAMBDA
from theta.evaluation.expressions import LambdaExpr
from theta.types.environment import Environment
from theta.types.procedure import Compound
from theta.types.symbol import Symbol


def check_params(params: SExpression, form: list[SExpression]) -> list[Symbol]:
    """Validate a parameter list: a list of distinct Symbols."""
    if not isinstance(params, list):
        raise ThetaMalformedForm(f"Parameter list must be a list, got {params!r}", form)
    for p in params:
        if not isinstance(p, Symbol):
            raise ThetaMalformedForm(f"Parameter must be a Symbol, got {p!r}", form)
    if len(set(params)) != len(params):
        raise ThetaMalformedForm("Duplicate parameter in lambda list", form)
    return params


def lambda_params(exp: list[SExpression]) -> list[Symbol]:
    if len(exp) < 2:
        raise ThetaMalformedForm("lambda requires a parameter list", exp)
    return check_params(exp[1], exp)


def lambda_body(exp: list[SExpression]) -> list[SExpression]:
    body = exp[2:]
    if not body:
        raise ThetaEmptyBody("lambda requires at least one body expression", exp)
    return body


def make_lambda(params: list[Symbol], body: list[SExpression]) -> list[SExpression]:
    return [LAMBDA, params, *body]


def analyze_lambda(exp: list[SExpression], analyze_fn) -> LambdaExpr:
    params = lambda_params(exp)
    body = lambda_body(exp)
    return LambdaExpr(tuple(params), tuple(analyze_fn(e) for e in body))


def lambda_form(node: LambdaExpr, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    # Capture the current env; the body runs later, in a frame extending it.
    return Compound(list(node.params), list(node.body), env)
