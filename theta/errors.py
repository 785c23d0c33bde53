"""Exception hierarchy for Theta.

Every error keeps the offending expression or value on ``expr`` so a host
can report it. The evaluator never recovers from these: they propagate out
of every recursive call to whoever invoked ``evaluate``.
"""

from __future__ import annotations

from typing import Any


class ThetaError(Exception):
    """ Base class for all Theta errors"""

    def __init__(self, message: str, expr: Any = None):
        super().__init__(message)
        self.expr = expr


class ThetaSyntaxError(ThetaError):
    """ Raised when a form has no valid reading"""


class ThetaUnknownExpression(ThetaSyntaxError):
    """ Raised when an expression matches no known form"""


class ThetaMisplacedElse(ThetaSyntaxError):
    """ Raised when a cond else clause is not the last clause"""


class ThetaEmptyBody(ThetaSyntaxError):
    """ Raised when a lambda, define or begin body has no expressions"""


class ThetaMalformedForm(ThetaSyntaxError):
    """ Raised when a special form has the wrong shape"""


class ThetaIncompleteInput(ThetaSyntaxError):
    """ Raised when the source ends inside an open list, string or quote"""


class ThetaEvalError(ThetaError):
    """ Base class for errors raised while evaluating a well-formed expression"""


class ThetaUnboundVariable(ThetaEvalError):
    """ Raised when a symbol is used or set before it is bound"""


class ThetaNotApplicable(ThetaEvalError):
    """ Raised when the operator of an application is not a procedure"""


class ThetaArityError(ThetaEvalError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

    def __init__(self, message: str, expr: Any = None, args_given: list | None = None):
        super().__init__(message, expr)
        self.args_given = list(args_given) if args_given is not None else []


class ThetaTypeError(ThetaEvalError):
    """ Raised when the types of arguments passed to a primitive are incorrect"""


class ThetaDepthExceeded(ThetaEvalError):
    """ Raised by the host when evaluation nests deeper than its budget"""
