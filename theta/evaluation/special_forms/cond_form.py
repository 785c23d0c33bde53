"""cond, the one derived form: rewritten into nested ifs before evaluation.

    (cond (p1 a1) (p2 a2 a3) (else a4))
    => (if p1 a1 (if p2 (begin a2 a3) a4))
"""

from typing import Sequence as Seq

from theta import EvaluatorFn
from theta import SExpression, LispValue
from theta.errors import ThetaMalformedForm, ThetaMisplacedElse
from theta.evaluation.classifier import ELSE as ELSE_SYMBOL
from theta.evaluation.expressions import Clause, Cond, Expression, Sequence, ELSE, FALSE
from theta.evaluation.special_forms.if_form import make_if
from theta.types.environment import Environment


def cond_clauses(exp: list[SExpression]) -> list[list[SExpression]]:
    clauses = exp[1:]
    for clause in clauses:
        if not isinstance(clause, list) or not clause:
            raise ThetaMalformedForm(f"cond clause must be a non-empty list, got {clause!r}", exp)
    return clauses


def clause_predicate(clause: list[SExpression]) -> SExpression:
    return clause[0]


def clause_actions(clause: list[SExpression]) -> list[SExpression]:
    return clause[1:]


def is_else_clause(clause: list[SExpression]) -> bool:
    return clause_predicate(clause) == ELSE_SYMBOL


def analyze_cond(exp: list[SExpression], analyze_fn) -> Cond:
    clauses = []
    raw_clauses = cond_clauses(exp)
    for clause in raw_clauses[:-1]:
        if is_else_clause(clause):
            raise ThetaMisplacedElse("else clause must be the last clause of cond", exp)
    for clause in raw_clauses:
        predicate = ELSE if is_else_clause(clause) else analyze_fn(clause_predicate(clause))
        actions = tuple(analyze_fn(a) for a in clause_actions(clause))
        clauses.append(Clause(predicate, actions))
    return Cond(tuple(clauses))


def to_single_expr(actions: Seq[Expression]) -> Expression:
    if not actions:
        return FALSE
    if len(actions) == 1:
        return actions[0]
    return Sequence(tuple(actions))


def cond_to_if(clauses: Seq[Clause]) -> Expression:
    """Rewrite `clauses`, in written order, into nested If nodes.

    An else clause ends the chain and must be last. Running out of clauses
    without an else yields #f.
    """
    if not clauses:
        return FALSE
    first, rest = clauses[0], clauses[1:]
    if first.is_else:
        if rest:
            raise ThetaMisplacedElse("else clause must be the last clause of cond", list(clauses))
        return to_single_expr(first.actions)
    return make_if(first.predicate, to_single_expr(first.actions), cond_to_if(rest))


def cond_form(node: Cond, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    return evaluate_fn(cond_to_if(node.clauses), env)
