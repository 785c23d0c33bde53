from __future__ import annotations

import logging
import sys
from typing import Literal, TextIO

from theta import SExpression, LispValue
from theta.builtins import register
from theta.config import get_log_level, get_prelude_path, get_recursion_limit
from theta.errors import ThetaDepthExceeded, ThetaError, ThetaIncompleteInput
from theta.evaluation.evaluator import evaluate
from theta.printer import to_string
from theta.reader.parser import lex, read, TokenStream
from theta.types.environment import Environment
from theta.types.unspecified import Unspecified


class Interpreter:
    """
    Host for the Theta evaluator: reads source text and evaluates each
    top-level form against one global Environment owned by this instance.
    """

    _logger = logging.getLogger("ThetaInterpreter")

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        limit = get_recursion_limit()
        if limit > sys.getrecursionlimit():
            sys.setrecursionlimit(limit)

        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = get_prelude_path()
            if path is not None:
                self._logger.info("Loading prelude from %s", path)
                self.eval_prelude(path.read_text(encoding='utf-8'))
        elif prelude:
            self.eval_prelude(prelude)

    def eval_form(self, expr: SExpression) -> LispValue:
        """Evaluate one already-read form in the global environment."""
        self._logger.debug("Evaluating %r", expr)
        try:
            return evaluate(expr, self.env)
        except RecursionError as e:
            raise ThetaDepthExceeded("Maximum evaluation depth exceeded", expr) from e

    def eval_prelude(self, code: str) -> None:
        stream = TokenStream(lex(code))
        while (expr := stream.parse_expr()) is not None:
            self.eval_form(expr)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` in order.

        Returns Unspecified for empty input, the value itself for a single
        form, otherwise the list of values. Errors propagate to the caller.
        """
        stream = TokenStream(lex(code))
        results: list[LispValue] = []
        while (expr := stream.parse_expr()) is not None:
            results.append(self.eval_form(expr))
        if not results:
            return Unspecified
        if len(results) == 1:
            return results[0]
        return results

    def repl(self, stdin: TextIO | None = None, stdout: TextIO | None = None,
             prompt: str = "theta> ", continuation: str = "... ") -> None:
        """Read-eval-print loop: report errors and continue with the next input.

        Lines are collected until the buffered source reads as complete forms,
        so a form may span several lines.
        """
        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout
        source = ""
        while True:
            stdout.write(continuation if source else prompt)
            stdout.flush()
            line = stdin.readline()
            if not line:
                if source.strip():
                    stdout.write("\nerror: incomplete input at end of stream")
                stdout.write("\n")
                break
            source += line
            if not source.strip():
                source = ""
                continue
            try:
                forms = read(source)
            except ThetaIncompleteInput:
                continue
            except ThetaError as e:
                source = ""
                self._report(e, stdout)
                continue
            source = ""
            try:
                for expr in forms:
                    value = self.eval_form(expr)
                    stdout.write(to_string(value, write=True) + "\n")
            except ThetaError as e:
                self._report(e, stdout)

    def _report(self, error: ThetaError, stdout: TextIO) -> None:
        self._logger.warning("Evaluation failed: %s", error)
        stdout.write(f"error: {error}\n")


def main() -> None:
    logging.basicConfig(level=get_log_level())
    Interpreter().repl()


if __name__ == "__main__":
    main()
