"""Core module for symrc4.
Provides:
- The 8-bit symbolic value (SymbolicByte)
- The persistent symbolic array (SymbolicArray)
- Z3 solver dispatch and verdicts
"""

from symrc4.core.errors import ArrayShapeError, ConcreteValueError, KeyLengthError
from symrc4.core.solver import Verdict, VerdictKind, solve
from symrc4.core.symbolic_array import Leaf, Node, SymbolicArray
from symrc4.core.types import SymbolicByte, free_bytes, ite

__all__ = [
    "SymbolicByte",
    "ite",
    "free_bytes",
    "SymbolicArray",
    "Leaf",
    "Node",
    "Verdict",
    "VerdictKind",
    "solve",
    "KeyLengthError",
    "ArrayShapeError",
    "ConcreteValueError",
]
