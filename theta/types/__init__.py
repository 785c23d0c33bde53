from __future__ import annotations

# Public surface for the runtime value types
from .symbol import Symbol
from .unspecified import Unspecified, UnspecifiedType
from .environment import Environment
from .procedure import Procedure, Primitive, Compound

__all__ = [
    "Symbol",
    "Unspecified",
    "UnspecifiedType",
    "Environment",
    "Procedure",
    "Primitive",
    "Compound",
]
