"""RC4 pseudo-random generation (PRGA).
The key stream is an explicit state machine: ``CipherState`` holds the
array and the two indices, ``prga_step`` performs one transition, and
``KeyStream`` is a pull-driven iterator that threads the state. A stream
cannot be rewound; build a new one from the key to replay it.
"""
from __future__ import annotations
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from symrc4.cipher.key_schedule import init_rc4, swap
from symrc4.core.symbolic_array import SymbolicArray
from symrc4.core.types import SymbolicByte, as_bytes
@dataclass(frozen=True)
class CipherState:
    """PRGA state: the permutation array and the indices i and j."""
    array: SymbolicArray
    i: SymbolicByte = field(default_factory=lambda: SymbolicByte.from_const(0))
    j: SymbolicByte = field(default_factory=lambda: SymbolicByte.from_const(0))
    @staticmethod
    def from_key(key: Sequence[SymbolicByte | int]) -> CipherState:
        return CipherState(init_rc4(key))
def prga_step(state: CipherState) -> tuple[SymbolicByte, CipherState]:
    """Advance the state once and return the produced key byte."""
    i = state.i + 1
    j = state.j + state.array.read(i)
    array = swap(i, j, state.array)
    output = array.read(array.read(i) + array.read(j))
    return output, CipherState(array, i, j)
class KeyStream:
    """Unbounded iterator of key bytes for one key."""
    def __init__(self, key: Sequence[SymbolicByte | int]) -> None:
        self._state = CipherState.from_key(key)
        self._produced = 0
    @property
    def state(self) -> CipherState:
        return self._state
    @property
    def produced(self) -> int:
        """Number of bytes drawn so far."""
        return self._produced
    def __iter__(self) -> Iterator[SymbolicByte]:
        return self
    def __next__(self) -> SymbolicByte:
        output, self._state = prga_step(self._state)
        self._produced += 1
        return output
    def take(self, count: int) -> list[SymbolicByte]:
        """Draw the next ``count`` bytes."""
        if count < 0:
            raise ValueError(f"Cannot take a negative number of bytes: {count}")
        return [next(self) for _ in range(count)]
def key_stream(key: Sequence[SymbolicByte | int]) -> KeyStream:
    """Start a fresh key stream for ``key``."""
    return KeyStream(key)
def key_stream_from_string(key: str) -> KeyStream:
    """Key stream for a text key whose characters are byte literals."""
    return KeyStream(as_bytes(key))
__all__ = [
    "CipherState",
    "prga_step",
    "KeyStream",
    "key_stream",
    "key_stream_from_string",
]
