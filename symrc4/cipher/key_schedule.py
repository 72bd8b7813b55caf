"""RC4 key-scheduling algorithm over symbolic arrays."""

from __future__ import annotations

from collections.abc import Sequence

from symrc4.core.errors import KeyLengthError
from symrc4.core.symbolic_array import DEFAULT_SIZE, SymbolicArray
from symrc4.core.types import SymbolicByte, coerce_byte
from symrc4.logging import get_logger

MIN_KEY_LENGTH = 1
MAX_KEY_LENGTH = DEFAULT_SIZE


def swap(i: SymbolicByte | int, j: SymbolicByte | int, array: SymbolicArray) -> SymbolicArray:
    """Exchange the elements at ``i`` and ``j``: two reads, then two writes."""
    at_i = array.read(i)
    at_j = array.read(j)
    return array.write(i, at_j).write(j, at_i)


def check_key_length(key: Sequence[object]) -> None:
    if not MIN_KEY_LENGTH <= len(key) <= MAX_KEY_LENGTH:
        raise KeyLengthError(len(key))


def init_rc4(key: Sequence[SymbolicByte | int]) -> SymbolicArray:
    """Build the permuted state array for ``key``.

    Args:
        key: 1 to 256 bytes, concrete or symbolic.
    Returns:
        The array after the 256 key-mixing swaps.
    Raises:
        KeyLengthError: if the key is empty or longer than 256 bytes.
    """
    check_key_length(key)
    words = [coerce_byte(k) for k in key]
    logger = get_logger()
    array = SymbolicArray.initial()
    j = SymbolicByte.from_const(0)
    for i in range(DEFAULT_SIZE):
        j = j + array.read(i) + words[i % len(words)]
        array = swap(i, j, array)
        if i % 64 == 63:
            logger.trace(f"key schedule: {i + 1}/{DEFAULT_SIZE} swaps", category="rc4")
    return array


__all__ = [
    "MIN_KEY_LENGTH",
    "MAX_KEY_LENGTH",
    "swap",
    "check_key_length",
    "init_rc4",
]
