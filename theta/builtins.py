"""Primitive procedures for the Theta runtime environment.

Each entry is a plain Python callable taking the evaluated arguments
positionally. `register` wraps them as Primitive values in a frame.
"""
from __future__ import annotations

import sys
from typing import Callable

from theta import LispValue
from theta.errors import ThetaArityError, ThetaTypeError
from theta.evaluation.apply import apply as apply_engine
from theta.printer import to_string
from theta.types.environment import Environment
from theta.types.procedure import Primitive, Procedure
from theta.types.symbol import Symbol
from theta.types.unspecified import Unspecified


def _numbers(name: str, args: tuple) -> tuple:
    for a in args:
        if isinstance(a, bool) or not isinstance(a, (int, float)):
            raise ThetaTypeError(f"All arguments to {name} must be numbers, got {to_string(a, write=True)}", a)
    return args


def _exactly(name: str, n: int, args: tuple) -> None:
    if len(args) != n:
        raise ThetaArityError(f"{name} requires exactly {n} argument(s)", Symbol(name), list(args))


def _a_list(name: str, xs: LispValue) -> list:
    if not isinstance(xs, list):
        raise ThetaTypeError(f"{name} expects a list, got {to_string(xs, write=True)}", xs)
    return xs


# -------------------------------
# Arithmetic
# -------------------------------
def add(*args: LispValue) -> LispValue:
    """Return the numeric sum of all arguments."""
    return sum(_numbers("+", args))


def sub(*args: LispValue) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise ThetaArityError("- requires at least 1 argument", Symbol("-"), [])
    first, *rest = _numbers("-", args)
    if not rest:
        return -first
    for x in rest:
        first -= x
    return first


def mul(*args: LispValue) -> LispValue:
    result = 1
    for x in _numbers("*", args):
        result *= x
    return result


def div(*args: LispValue) -> LispValue:
    """Divide left-to-right; with one arg returns the reciprocal."""
    if not args:
        raise ThetaArityError("/ requires at least 1 argument", Symbol("/"), [])
    first, *rest = _numbers("/", args)
    if not rest:
        first, rest = 1, [first]
    try:
        for x in rest:
            first /= x
    except ZeroDivisionError:
        raise ThetaTypeError("Division by zero", 0) from None
    return first


# -------------------------------
# Comparison and predicates
# -------------------------------
def _chain(name: str, op: Callable[[LispValue, LispValue], bool]) -> Callable[..., bool]:
    def compare(*args: LispValue) -> bool:
        _numbers(name, args)
        return all(op(a, b) for a, b in zip(args, args[1:]))
    compare.__name__ = f"compare_{name}"
    return compare


num_eq = _chain("=", lambda a, b: a == b)
lt = _chain("<", lambda a, b: a < b)
lte = _chain("<=", lambda a, b: a <= b)
gt = _chain(">", lambda a, b: a > b)
gte = _chain(">=", lambda a, b: a >= b)


def logical_not(*args: LispValue) -> bool:
    """Only #f is false, so (not x) is #t exactly when x is #f."""
    _exactly("not", 1, args)
    return args[0] is False


def is_eq(*args: LispValue) -> bool:
    """Identity for procedures and lists, value equality for atoms."""
    _exactly("eq?", 2, args)
    a, b = args
    if isinstance(a, (list, Procedure)) or isinstance(b, (list, Procedure)):
        return a is b
    return type(a) is type(b) and a == b


def is_equal(*args: LispValue) -> bool:
    """Deep structural equality; booleans never equal numbers."""
    _exactly("equal?", 2, args)
    return _equal(*args)


def _equal(a: LispValue, b: LispValue) -> bool:
    if a is b:
        return True
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, bool) or isinstance(b, bool):
        return False
    return a == b


def is_number(*args: LispValue) -> bool:
    _exactly("number?", 1, args)
    return isinstance(args[0], (int, float)) and not isinstance(args[0], bool)


def is_symbol(*args: LispValue) -> bool:
    _exactly("symbol?", 1, args)
    return isinstance(args[0], Symbol)


def is_procedure(*args: LispValue) -> bool:
    _exactly("procedure?", 1, args)
    return isinstance(args[0], Procedure)


# -------------------------------
# Lists
# -------------------------------
def cons(*args: LispValue) -> list[LispValue]:
    """Return a new list with head prepended to tail (non-destructive)."""
    _exactly("cons", 2, args)
    head, tail = args
    return [head] + _a_list("cons", tail)


def car(*args: LispValue) -> LispValue:
    _exactly("car", 1, args)
    xs = _a_list("car", args[0])
    if not xs:
        raise ThetaTypeError("car of empty list", xs)
    return xs[0]


def cdr(*args: LispValue) -> list[LispValue]:
    _exactly("cdr", 1, args)
    xs = _a_list("cdr", args[0])
    if not xs:
        raise ThetaTypeError("cdr of empty list", xs)
    return xs[1:]


def list_builtin(*args: LispValue) -> list[LispValue]:
    return list(args)


def is_null(*args: LispValue) -> bool:
    _exactly("null?", 1, args)
    return isinstance(args[0], list) and not args[0]


def is_pair(*args: LispValue) -> bool:
    _exactly("pair?", 1, args)
    return isinstance(args[0], list) and len(args[0]) > 0


def apply_builtin(*args: LispValue) -> LispValue:
    """(apply f '(a b ...)) calls f with the list elements as arguments."""
    _exactly("apply", 2, args)
    fn, fn_args = args
    return apply_engine(fn, _a_list("apply", fn_args))


# -------------------------------
# Output
# -------------------------------
def display(*args: LispValue) -> LispValue:
    _exactly("display", 1, args)
    sys.stdout.write(to_string(args[0]))
    return Unspecified


def newline(*args: LispValue) -> LispValue:
    _exactly("newline", 0, args)
    sys.stdout.write("\n")
    return Unspecified


PRIMITIVES: dict[str, Callable[..., LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": num_eq,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "not": logical_not,
    "eq?": is_eq,
    "equal?": is_equal,
    "number?": is_number,
    "symbol?": is_symbol,
    "procedure?": is_procedure,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "list": list_builtin,
    "null?": is_null,
    "pair?": is_pair,
    "apply": apply_builtin,
    "display": display,
    "newline": newline,
}


def register(env: Environment) -> None:
    """Register all primitive procedures and constants into the given environment."""
    env.update({Symbol(name): Primitive(name, fn) for name, fn in PRIMITIVES.items()})
    env.define(Symbol("true"), True)
    env.define(Symbol("false"), False)
