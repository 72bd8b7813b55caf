"""Property-based testing infrastructure using Hypothesis.
Provides strategies for generating keys, plaintexts and symbolic bytes, and a
stateful machine that drives a SymbolicArray alongside a plain list model.
"""

from __future__ import annotations

import z3
from hypothesis import strategies as st
from hypothesis.stateful import RuleBasedStateMachine, invariant, precondition, rule

from symrc4.cipher.key_schedule import swap
from symrc4.core.symbolic_array import SymbolicArray
from symrc4.core.types import SymbolicByte


def byte_values() -> st.SearchStrategy:
    """Strategy for ints in 0..255."""
    return st.integers(min_value=0, max_value=255)


def concrete_bytes() -> st.SearchStrategy:
    """Strategy for literal SymbolicBytes."""
    return byte_values().map(SymbolicByte.from_const)


def keys(min_size: int = 1, max_size: int = 32) -> st.SearchStrategy:
    """Strategy for valid RC4 keys as ``bytes``."""
    return st.binary(min_size=min_size, max_size=max_size)


def plaintexts(max_size: int = 64) -> st.SearchStrategy:
    """Strategy for plaintexts as ``bytes``."""
    return st.binary(min_size=0, max_size=max_size)


def invalid_key_lengths() -> st.SearchStrategy:
    """Lengths that the key schedule must reject."""
    return st.one_of(st.just(0), st.integers(min_value=257, max_value=300))


def distinct_index_pairs() -> st.SearchStrategy:
    """Pairs ``(i, j)`` of different array indices."""
    return st.tuples(byte_values(), byte_values()).filter(lambda p: p[0] != p[1])


def reference_rc4(key: bytes, data: bytes) -> bytes:
    """Plain-list RC4 used as an oracle for the symbolic pipeline."""
    s = list(range(256))
    j = 0
    for i in range(256):
        j = (j + s[i] + key[i % len(key)]) % 256
        s[i], s[j] = s[j], s[i]
    out = bytearray()
    i = j = 0
    for byte in data:
        i = (i + 1) % 256
        j = (j + s[i]) % 256
        s[i], s[j] = s[j], s[i]
        out.append(byte ^ s[(s[i] + s[j]) % 256])
    return bytes(out)


def proves(claim: z3.BoolRef) -> bool:
    """True if ``claim`` holds for every assignment."""
    solver = z3.Solver()
    solver.add(z3.Not(claim))
    return solver.check() == z3.unsat


class SymbolicArrayMachine(RuleBasedStateMachine):
    """Stateful test keeping a SymbolicArray in step with a list.
    Checks that:
    1. Writes are visible to later reads at the same index
    2. Writes leave every other index unchanged
    3. Old versions are never modified by later writes
    """

    def __init__(self):
        super().__init__()
        self.array = SymbolicArray.initial()
        self.model = list(range(256))
        self.snapshots: list[tuple[SymbolicArray, list[int]]] = []

    @rule(index=byte_values(), value=byte_values())
    def write_cell(self, index, value):
        self.array = self.array.write(index, value)
        self.model[index] = value

    @rule(i=byte_values(), j=byte_values())
    def swap_cells(self, i, j):
        self.array = swap(i, j, self.array)
        self.model[i], self.model[j] = self.model[j], self.model[i]

    @rule(index=byte_values())
    def read_cell(self, index):
        assert self.array.read(index).to_int() == self.model[index]

    @precondition(lambda self: len(self.snapshots) < 5)
    @rule()
    def snapshot(self):
        self.snapshots.append((self.array, list(self.model)))

    @invariant()
    def matches_model(self):
        assert self.array.concrete_values() == self.model

    @invariant()
    def snapshots_unchanged(self):
        for array, model in self.snapshots:
            assert array.concrete_values() == model


__all__ = [
    "byte_values",
    "concrete_bytes",
    "keys",
    "plaintexts",
    "invalid_key_lengths",
    "distinct_index_pairs",
    "reference_rc4",
    "proves",
    "SymbolicArrayMachine",
]
