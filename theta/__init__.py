# Core type aliases for Theta's data model.
# We use plain Python types (int, float, str, bool, list) to represent both
# code (forms produced by the reader) and runtime values. Identifiers are
# Symbol instances; there is no Cons type.
#
# Naming guidance:
# - SExpression: Use in reader/analyzer code to denote raw syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Raw forms alias
SExpression = LispValue

# Evaluator function type: passed into special-form handlers
EvaluatorFn = Callable[..., LispValue]
