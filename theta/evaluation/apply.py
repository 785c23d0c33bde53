"""Application engine for Theta.

Both the evaluator and the `apply` primitive route through here:
- Primitive procedures call their Python callable with the arguments in order.
- Compound procedures bind their parameters in a new frame whose parent is
  the environment captured when the lambda was evaluated, then run the body.
"""

from theta import LispValue
from theta.errors import ThetaArityError, ThetaNotApplicable
from theta.types.procedure import Compound, Primitive


def apply_primitive(fn: Primitive, args: list[LispValue]) -> LispValue:
    # Failures inside the callable are the primitive's own; let them propagate.
    return fn.fn(*args)


def apply_compound(fn: Compound, args: list[LispValue]) -> LispValue:
    """Apply a compound procedure to already-evaluated arguments.

    The new frame extends `fn.env`, never the caller's environment, which is
    what makes free variables in the body resolve lexically.
    """
    if len(args) != fn.arity:
        raise ThetaArityError(
            f"{fn} expects {fn.arity} argument(s), got {len(args)}", fn, args
        )
    # evaluator imports this module
    from theta.evaluation.evaluator import eval_sequence
    new_env = fn.env.extend(fn.params, args)
    return eval_sequence(fn.body, new_env)


def apply(procedure: object, args: list[LispValue]) -> LispValue:
    """Apply either a Primitive or a Compound procedure; anything else is an error."""
    if isinstance(procedure, Compound):
        return apply_compound(procedure, list(args))
    elif isinstance(procedure, Primitive):
        return apply_primitive(procedure, list(args))
    else:
        raise ThetaNotApplicable(f"Cannot apply non-procedure {procedure!r}", procedure)
