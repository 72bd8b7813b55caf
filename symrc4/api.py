"""Public API for symrc4."""
from __future__ import annotations
from symrc4.cipher import ops
from symrc4.cipher.keystream import KeyStream, key_stream_from_string
from symrc4.core.types import ByteLike, as_bytes, to_concrete, to_hex
from symrc4.verification.prover import prove_claim, prove_configured, prove_round_trip
def encrypt(key: ByteLike, plaintext: ByteLike) -> bytes:
    """
    RC4-encrypt concrete data.
    Text arguments are taken character by character as byte values.
    Args:
        key: 1 to 256 key bytes
        plaintext: Data to encrypt
    Returns:
        Ciphertext of the same length
    Example:
        >>> encrypt("Key", "Plaintext").hex()
        'bbf316e8d940af0ad3'
        >>> encrypt("Wiki", "pedia").hex()
        '1021bf0420'
        >>> encrypt("Secret", "Attack at dawn").hex()
        '45a01f645fc35b383552544b9bf5'
    """
    return to_concrete(ops.encrypt(as_bytes(key), as_bytes(plaintext)))
def decrypt(key: ByteLike, ciphertext: ByteLike) -> bytes:
    """
    RC4-decrypt concrete data; the same transform as :func:`encrypt`.
    Example:
        >>> decrypt("Wiki", bytes([0x10, 0x21, 0xbf, 0x04, 0x20]))
        b'pedia'
    """
    return to_concrete(ops.decrypt(as_bytes(key), as_bytes(ciphertext)))
def decrypt_text(key: ByteLike, ciphertext: ByteLike) -> str:
    """Decrypt and return the plaintext as latin-1 text."""
    return decrypt(key, ciphertext).decode("latin-1")
def key_stream_bytes(key: ByteLike, count: int) -> bytes:
    """First ``count`` bytes of the key stream for a concrete key."""
    if isinstance(key, str):
        stream = key_stream_from_string(key)
    else:
        stream = KeyStream(as_bytes(key))
    return to_concrete(stream.take(count))
__all__ = [
    "encrypt",
    "decrypt",
    "decrypt_text",
    "key_stream_bytes",
    "prove_round_trip",
    "prove_claim",
    "prove_configured",
    "to_hex",
]
