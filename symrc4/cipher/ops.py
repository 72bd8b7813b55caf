"""Encryption and decryption over symbolic bytes.
Both are the same transform: XOR with the key stream. Output length equals
input length; the stream is consumed only as far as the input reaches.
"""
from __future__ import annotations
from collections.abc import Iterable, Sequence
from symrc4.cipher.keystream import KeyStream
from symrc4.core.types import SymbolicByte, coerce_byte
def xor_with_stream(stream: Iterable[SymbolicByte], data: Sequence[SymbolicByte | int]) -> list[SymbolicByte]:
    """XOR ``data`` with successive bytes drawn from ``stream``."""
    # data first, so the stream is not advanced past the last input byte
    return [coerce_byte(b) ^ k for b, k in zip(data, stream)]
def encrypt(key: Sequence[SymbolicByte | int], plaintext: Sequence[SymbolicByte | int]) -> list[SymbolicByte]:
    """RC4-encrypt ``plaintext`` under ``key``."""
    return xor_with_stream(KeyStream(key), plaintext)
def decrypt(key: Sequence[SymbolicByte | int], ciphertext: Sequence[SymbolicByte | int]) -> list[SymbolicByte]:
    """RC4-decrypt ``ciphertext``; identical to :func:`encrypt`."""
    return xor_with_stream(KeyStream(key), ciphertext)
__all__ = [
    "xor_with_stream",
    "encrypt",
    "decrypt",
]
