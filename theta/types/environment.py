"""Runtime environment for Theta.

An Environment is one frame of bindings from Symbols to evaluated values plus
an `outer` link to its parent frame. The global frame has no parent. Frames
are shared by reference: every compound procedure created in a frame keeps
that frame alive, and `define`/`set` mutate it in place.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from theta import LispValue
from theta.errors import ThetaMalformedForm, ThetaUnboundVariable
from theta.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this (innermost) frame, overwriting any
        existing binding here. Outer frames are never touched.
        """
        if not isinstance(name, Symbol):
            raise ThetaMalformedForm(f"Cannot define {name!r} as a symbol", name)
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises ThetaUnboundVariable if no frame holds the symbol.
        """
        env = self.find(name)
        if env is None:
            raise ThetaUnboundVariable(f"Cannot set unbound variable {name}", name)
        env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, searching outward.

        Raises ThetaUnboundVariable if not found in any frame.
        """
        env = self.find(name)
        if env is None:
            raise ThetaUnboundVariable(f"Unbound variable {name}", name)
        return env.vars[name]

    def extend(self, params: Iterable[Symbol], args: Iterable[LispValue]) -> Environment:
        """Return a new child frame binding `params` to `args` positionally.

        The caller checks arity; extra items on either side are ignored here.
        """
        child = Environment(outer=self)
        for param, arg in zip(params, args):
            child.vars[param] = arg
        return child

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging; the global frame is elided."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env: Optional[Environment] = self
            while env is not None:
                if env.outer is None and env is not self:
                    chain.append("<global>")
                else:
                    env_buf = StringIO()
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
