from theta import SExpression, LispValue, EvaluatorFn
from theta.errors import ThetaMalformedForm
from theta.evaluation.expressions import Quote
from theta.types.environment import Environment


def quote_datum(exp: list[SExpression]) -> SExpression:
    if len(exp) != 2:
        raise ThetaMalformedForm("quote expects exactly 1 argument", exp)
    return exp[1]


def analyze_quote(exp: list[SExpression], analyze_fn) -> Quote:
    return Quote(quote_datum(exp))


def quote_form(node: Quote, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    return node.datum
