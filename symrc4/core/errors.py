"""Exceptions raised by symrc4.
Each one subclasses a builtin so callers may catch either form.
"""
from __future__ import annotations
class KeyLengthError(ValueError):
    """RC4 key length outside 1..256."""
    def __init__(self, length: int):
        super().__init__(f"RC4 requires a key of length between 1 and 256, received: {length}")
        self.length = length
class ArrayShapeError(RuntimeError):
    """Two trees, or a tree and an index, disagree on shape.
    Arrays are only built balanced, so this signals a broken internal invariant.
    """
class ConcreteValueError(ValueError):
    """A concrete value was requested from a symbolic byte."""
__all__ = [
    "KeyLengthError",
    "ArrayShapeError",
    "ConcreteValueError",
]
