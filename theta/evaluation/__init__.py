from __future__ import annotations

# Public surface for the evaluation core
from .classifier import Category, classify
from .expressions import (
    ELSE,
    Application,
    Assignment,
    Clause,
    Cond,
    Definition,
    Expression,
    If,
    LambdaExpr,
    Literal,
    Quote,
    Sequence,
    Variable,
)
from .analyzer import analyze
from .apply import apply
from .evaluator import evaluate, eval_sequence, eval_operands
from .special_forms.cond_form import cond_to_if, to_single_expr

__all__ = [
    "Category",
    "classify",
    "ELSE",
    "Application",
    "Assignment",
    "Clause",
    "Cond",
    "Definition",
    "Expression",
    "If",
    "LambdaExpr",
    "Literal",
    "Quote",
    "Sequence",
    "Variable",
    "analyze",
    "apply",
    "evaluate",
    "eval_sequence",
    "eval_operands",
    "cond_to_if",
    "to_single_expr",
]
