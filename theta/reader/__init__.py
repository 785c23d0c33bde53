from __future__ import annotations

from .parser import lex, read, TokenStream

__all__ = ["lex", "read", "TokenStream"]
