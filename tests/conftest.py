import pytest

from theta.builtins import register
from theta.reader.parser import TokenStream, lex
from theta.evaluation.evaluator import evaluate
from theta.types.environment import Environment


@pytest.fixture
def env():
    """Fresh global environment with the primitive procedures loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(env):
    """Read and evaluate every form in a source string; return the last value."""
    def _run(source: str):
        result = None
        for form in TokenStream(lex(source)).parse_all():
            result = evaluate(form, env)
        return result
    return _run
