import io
import logging

import pytest

from theta.errors import ThetaDepthExceeded, ThetaUnboundVariable
from theta.interpreter import Interpreter
from theta.printer import to_string
from theta.types import Primitive, Symbol, Unspecified


@pytest.fixture
def interp(monkeypatch):
    monkeypatch.delenv("THETA_PRELUDE_PATH", raising=False)
    return Interpreter()


def test_eval_single_and_multiple_forms(interp):
    assert interp.eval("(+ 1 2)") == 3
    assert interp.eval("(define x 2) (* x 21)") == [Unspecified, 42]
    assert interp.eval("   ") is Unspecified


def test_state_persists_between_calls(interp):
    interp.eval("(define (square n) (* n n))")
    assert interp.eval("(square 12)") == 144


def test_interpreters_do_not_share_globals():
    a, b = Interpreter(prelude=None), Interpreter(prelude=None)
    a.eval("(define only-a 1)")
    with pytest.raises(ThetaUnboundVariable):
        b.eval("only-a")


def test_inline_prelude():
    interp = Interpreter(prelude="(define answer 42)")
    assert interp.eval("answer") == 42


def test_prelude_from_config(tmp_path, monkeypatch):
    path = tmp_path / "prelude.scm"
    path.write_text("(define (twice x) (* 2 x))", encoding="utf-8")
    monkeypatch.setenv("THETA_PRELUDE_PATH", str(path))
    assert Interpreter().eval("(twice 4)") == 8


def test_errors_propagate_from_eval(interp):
    with pytest.raises(ThetaUnboundVariable):
        interp.eval("(+ 1 missing)")


def test_deep_recursion_becomes_depth_error(monkeypatch):
    monkeypatch.setenv("THETA_RECURSION_LIMIT", "100")
    interp = Interpreter(prelude=None)
    interp.eval("(define (loop n) (+ 1 (loop n)))")
    with pytest.raises(ThetaDepthExceeded) as info:
        interp.eval("(loop 0)")
    assert info.value.expr == [Symbol("loop"), 0]


def test_repl_reports_and_resumes(interp, caplog):
    stdin = io.StringIO("(define x 3)\n(car x)\n\n(list x \"s\" #f)\n")
    stdout = io.StringIO()
    with caplog.at_level(logging.WARNING, logger="ThetaInterpreter"):
        interp.repl(stdin=stdin, stdout=stdout, prompt="> ")
    lines = stdout.getvalue().split("> ")
    assert lines[1] == "ok\n"
    assert lines[2].startswith("error: car expects a list")
    assert lines[4] == '(3 "s" #f)\n'
    assert "Evaluation failed" in caplog.text


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, "#t"),
        (False, "#f"),
        (12, "12"),
        ([1, [Symbol("a"), "b"]], '(1 (a "b"))'),
        (Unspecified, "ok"),
        (Primitive("car", None), "#<procedure car>"),
    ],
)
def test_to_string_write(value, expected):
    assert to_string(value, write=True) == expected


def test_to_string_lambda(interp):
    assert to_string(interp.eval("(lambda (x y) x)")) == "#<lambda (x y)>"


def test_repl_reads_forms_across_lines(interp):
    stdin = io.StringIO("(define (sq x)\n  (* x x))\n(sq 4)\n")
    stdout = io.StringIO()
    interp.repl(stdin=stdin, stdout=stdout, prompt="> ", continuation="... ")
    assert stdout.getvalue().split("> ") == ["", "... ok\n", "16\n", "\n"]


def test_repl_resumes_after_bad_string_literal(interp):
    stdin = io.StringIO('"\\x"\n(+ 1 2)\n')
    stdout = io.StringIO()
    interp.repl(stdin=stdin, stdout=stdout, prompt="> ")
    lines = stdout.getvalue().split("> ")
    assert lines[1].startswith("error: Invalid string literal")
    assert lines[2] == "3\n"


def test_repl_reports_incomplete_input_at_end(interp):
    stdout = io.StringIO()
    interp.repl(stdin=io.StringIO("(+ 1\n"), stdout=stdout, prompt="> ")
    assert stdout.getvalue().endswith("error: incomplete input at end of stream\n")


def test_eval_decodes_multiline_string(interp):
    assert interp.eval('"line one\nline two"') == "line one\nline two"
