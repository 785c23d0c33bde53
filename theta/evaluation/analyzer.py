"""One-time translation of raw forms into expression nodes.

Classification runs once per form here; after that the evaluator only
dispatches on node type.
"""

from __future__ import annotations

from theta import SExpression
from theta.evaluation.classifier import Category, classify
from theta.evaluation.expressions import Application, Expression, Literal, Variable
from theta.evaluation.special_forms import ANALYZERS


def analyze(exp: SExpression) -> Expression:
    """Build the expression node for raw form `exp`, recursively.

    Raises ThetaUnknownExpression for unrecognized data and the syntax errors
    of the individual forms for malformed special forms.
    """
    match classify(exp):
        case Category.LITERAL:
            return Literal(exp)
        case Category.VARIABLE:
            return Variable(exp)
        case Category.APPLICATION:
            operator, *operands = exp
            return Application(analyze(operator), tuple(analyze(o) for o in operands))
        case category:
            return ANALYZERS[category](exp, analyze)
