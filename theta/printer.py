"""Render Theta values in Lisp notation for the REPL and `display`."""

from __future__ import annotations

from theta import LispValue
from theta.types.procedure import Procedure
from theta.types.symbol import Symbol


def to_string(value: LispValue, *, write: bool = False) -> str:
    """Return the printed representation of `value`.

    With `write=True` strings are shown quoted and escaped (REPL echo);
    otherwise they are shown raw (display).
    """
    if value is True:
        return "#t"
    if value is False:
        return "#f"
    if isinstance(value, str):
        return _quote_string(value) if write else value
    if isinstance(value, list):
        return "(" + " ".join(to_string(v, write=write) for v in value) + ")"
    if isinstance(value, (Symbol, Procedure)):
        return str(value)
    return repr(value)


def _quote_string(s: str) -> str:
    escaped = s.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'
