"""Registry of special forms for the Theta evaluator.

ANALYZERS maps each tagged Category to the transformer that turns a raw form
into its expression node. SPECIAL_FORMS maps each node type to the handler
that implements its evaluation rule. The evaluator consults these tables
before falling back to ordinary application.
"""

from theta.evaluation.classifier import Category
from theta.evaluation.expressions import Assignment, Cond, Definition, If, LambdaExpr, Quote, Sequence
from theta.evaluation.special_forms.quote_form import analyze_quote, quote_form
from theta.evaluation.special_forms.set_form import analyze_set, set_form
from theta.evaluation.special_forms.define_form import analyze_define, define_form
from theta.evaluation.special_forms.if_form import analyze_if, if_form
from theta.evaluation.special_forms.lambda_form import analyze_lambda, lambda_form
from theta.evaluation.special_forms.progn_form import analyze_progn, progn_form
from theta.evaluation.special_forms.cond_form import analyze_cond, cond_form

ANALYZERS = {
    Category.QUOTE: analyze_quote,
    Category.ASSIGNMENT: analyze_set,
    Category.DEFINITION: analyze_define,
    Category.IF: analyze_if,
    Category.LAMBDA: analyze_lambda,
    Category.SEQUENCE: analyze_progn,
    Category.COND: analyze_cond,
}

SPECIAL_FORMS = {
    Quote: quote_form,
    Assignment: set_form,
    Definition: define_form,
    If: if_form,
    LambdaExpr: lambda_form,
    Sequence: progn_form,
    Cond: cond_form,
}
