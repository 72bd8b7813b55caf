"""RC4 key schedule, key stream and XOR cipher over symbolic bytes."""

from symrc4.cipher.key_schedule import init_rc4, swap
from symrc4.cipher.keystream import (
    CipherState,
    KeyStream,
    key_stream,
    key_stream_from_string,
    prga_step,
)
from symrc4.cipher.ops import decrypt, encrypt, xor_with_stream

__all__ = [
    "init_rc4",
    "swap",
    "CipherState",
    "KeyStream",
    "key_stream",
    "key_stream_from_string",
    "prga_step",
    "encrypt",
    "decrypt",
    "xor_with_stream",
]
