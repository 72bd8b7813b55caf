"""Core symbolic types for symrc4.
This module defines the 8-bit value used throughout the cipher. A value is a
thin wrapper around a Z3 bit-vector; when every operand of an operation is a
literal the result is folded back to a literal, so concrete encryption never
builds solver terms.
"""
from __future__ import annotations
from collections.abc import Sequence
from dataclasses import dataclass
import z3
from symrc4.core.errors import ConcreteValueError
WIDTH = 8
MASK = (1 << WIDTH) - 1
Condition = z3.BoolRef | bool
def is_true(cond: Condition) -> bool:
    """True only if the condition is the literal ``True``."""
    if isinstance(cond, bool):
        return cond
    return z3.is_true(cond)
def is_false(cond: Condition) -> bool:
    """True only if the condition is the literal ``False``."""
    if isinstance(cond, bool):
        return not cond
    return z3.is_false(cond)
@dataclass(frozen=True, eq=False)
class SymbolicByte:
    """An 8-bit value, concrete or symbolic.
    Attributes:
        expr: Z3 bit-vector expression of width 8
    """
    expr: z3.BitVecRef
    @staticmethod
    def from_const(value: int) -> SymbolicByte:
        """Create a literal byte. Values outside 0..255 are rejected."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected an int byte value, got {type(value).__name__}")
        if not 0 <= value <= MASK:
            raise ValueError(f"Byte value out of range 0..255: {value}")
        return SymbolicByte(z3.BitVecVal(value, WIDTH))
    @staticmethod
    def symbolic(name: str) -> SymbolicByte:
        """Allocate a free (unconstrained) byte variable."""
        return SymbolicByte(z3.BitVec(name, WIDTH))
    @property
    def is_concrete(self) -> bool:
        return z3.is_bv_value(self.expr)
    def concrete_value(self) -> int | None:
        """Return the literal value, or None when the byte is symbolic."""
        if z3.is_bv_value(self.expr):
            return self.expr.as_long()
        return None
    def to_int(self) -> int:
        """Return the literal value or raise ConcreteValueError."""
        value = self.concrete_value()
        if value is None:
            raise ConcreteValueError(f"Byte has no concrete value: {self.expr}")
        return value
    def bits_be(self) -> list[z3.BoolRef]:
        """Bit-blast the value, most significant bit first."""
        value = self.concrete_value()
        if value is not None:
            return [z3.BoolVal(bool((value >> k) & 1)) for k in range(WIDTH - 1, -1, -1)]
        return [z3.Extract(k, k, self.expr) == 1 for k in range(WIDTH - 1, -1, -1)]
    def __add__(self, other: SymbolicByte | int) -> SymbolicByte:
        other = coerce_byte(other)
        a, b = self.concrete_value(), other.concrete_value()
        if a is not None and b is not None:
            return SymbolicByte.from_const((a + b) & MASK)
        return SymbolicByte(self.expr + other.expr)
    def __radd__(self, other: int) -> SymbolicByte:
        return coerce_byte(other) + self
    def __xor__(self, other: SymbolicByte | int) -> SymbolicByte:
        other = coerce_byte(other)
        a, b = self.concrete_value(), other.concrete_value()
        if a is not None and b is not None:
            return SymbolicByte.from_const(a ^ b)
        return SymbolicByte(self.expr ^ other.expr)
    def __rxor__(self, other: int) -> SymbolicByte:
        return coerce_byte(other) ^ self
    def equals(self, other: SymbolicByte | int) -> z3.BoolRef:
        """Z3 equality, folded to a literal when both sides are concrete."""
        other = coerce_byte(other)
        a, b = self.concrete_value(), other.concrete_value()
        if a is not None and b is not None:
            return z3.BoolVal(a == b)
        return self.expr == other.expr
    def __repr__(self) -> str:
        value = self.concrete_value()
        if value is not None:
            return f"SymbolicByte(0x{value:02x})"
        return f"SymbolicByte({self.expr})"
def ite(condition: Condition, then: SymbolicByte, otherwise: SymbolicByte) -> SymbolicByte:
    """Conditional selection between two bytes."""
    if is_true(condition):
        return then
    if is_false(condition):
        return otherwise
    if then is otherwise or then.expr.eq(otherwise.expr):
        return then
    return SymbolicByte(z3.If(condition, then.expr, otherwise.expr))
def coerce_byte(value: SymbolicByte | int) -> SymbolicByte:
    """Accept either a SymbolicByte or a Python int in 0..255."""
    if isinstance(value, SymbolicByte):
        return value
    return SymbolicByte.from_const(value)
ByteLike = bytes | bytearray | str | Sequence[int | SymbolicByte]
def as_bytes(data: ByteLike) -> list[SymbolicByte]:
    """Convert bytes, latin-1 text or a sequence of ints/bytes to SymbolicBytes.
    Text characters above U+00FF raise ValueError rather than being truncated.
    """
    if isinstance(data, str):
        try:
            data = data.encode("latin-1")
        except UnicodeEncodeError as e:
            raise ValueError(f"Text contains characters outside 0..255: {e.object[e.start:e.end]!r}") from e
    return [coerce_byte(b) for b in data]
def free_bytes(prefix: str, count: int) -> list[SymbolicByte]:
    """Allocate ``count`` free bytes named ``{prefix}_0`` .. ``{prefix}_{count-1}``."""
    if count < 0:
        raise ValueError(f"Byte count must be non-negative: {count}")
    return [SymbolicByte.symbolic(f"{prefix}_{k}") for k in range(count)]
def to_concrete(values: Sequence[SymbolicByte]) -> bytes:
    """Convert fully concrete bytes back to ``bytes``."""
    return bytes(v.to_int() for v in values)
def to_hex(values: Sequence[SymbolicByte] | bytes) -> str:
    """Render concrete output as lowercase hex, two digits per byte."""
    if isinstance(values, (bytes, bytearray)):
        return values.hex()
    return to_concrete(values).hex()
__all__ = [
    "WIDTH",
    "Condition",
    "SymbolicByte",
    "ByteLike",
    "ite",
    "is_true",
    "is_false",
    "coerce_byte",
    "as_bytes",
    "free_bytes",
    "to_concrete",
    "to_hex",
]
