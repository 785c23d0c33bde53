import pytest

from theta.errors import ThetaArityError, ThetaNotApplicable, ThetaTypeError
from theta.evaluation.apply import apply
from theta.evaluation.expressions import Application, Variable
from theta.types import Compound, Environment, Primitive, Symbol

S = Symbol


def test_apply_primitive_passes_arguments_in_order():
    seen = []
    proc = Primitive("record", lambda *args: seen.extend(args) or len(args))
    assert apply(proc, [3, 1, 2]) == 3
    assert seen == [3, 1, 2]


def test_primitive_errors_propagate_unchanged():
    def boom(*args):
        raise KeyError("native failure")

    with pytest.raises(KeyError):
        apply(Primitive("boom", boom), [])


def test_apply_compound_binds_params_in_new_frame():
    defining = Environment()
    defining.define(S("+"), Primitive("+", lambda *a: sum(a)))
    body = [Application(Variable(S("+")), (Variable(S("x")), Variable(S("y"))))]
    proc = Compound([S("x"), S("y")], body, defining)
    assert apply(proc, [3, 4]) == 7
    # parameters never leak into the defining frame
    assert S("x") not in defining.vars


def test_apply_compound_uses_captured_env_not_caller():
    defining = Environment()
    defining.define(S("free"), "lexical")
    proc = Compound([], [Variable(S("free"))], defining)

    caller = Environment()
    caller.define(S("free"), "dynamic")
    assert apply(proc, []) == "lexical"


def test_apply_compound_arity():
    proc = Compound([S("a")], [Variable(S("a"))], Environment())
    with pytest.raises(ThetaArityError) as info:
        apply(proc, [1, 2])
    assert info.value.expr is proc
    assert info.value.args_given == [1, 2]


@pytest.mark.parametrize("value", [1, "f", S("f"), [1, 2], None, len])
def test_apply_non_procedure(value):
    with pytest.raises(ThetaNotApplicable):
        apply(value, [])

# -----------------------------
# apply primitive from Lisp code
# -----------------------------

def test_apply_builtin_plus_with_list(run):
    assert run("(apply + (list 1 2 3))") == 6


def test_apply_builtin_lambda(run):
    assert run("(apply (lambda (a b) (- a b)) '(10 4))") == 6


def test_apply_builtin_requires_list(run):
    with pytest.raises(ThetaTypeError):
        run("(apply + 5)")


def test_higher_order_procedures(run):
    source = """
    (define (map f xs)
      (if (null? xs) '() (cons (f (car xs)) (map f (cdr xs)))))
    (define (compose f g) (lambda (x) (f (g x))))
    (map (compose (lambda (x) (* x 2)) (lambda (x) (+ x 1))) '(1 2 3))
    """
    assert run(source) == [4, 6, 8]
