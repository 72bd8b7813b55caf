"""
Examples of symrc4 in use.
Run with ``python examples/rc4_examples.py``. The last example builds the
full symbolic key schedule and can take a while.
"""

from symrc4 import decrypt_text, encrypt, load_config, prove_configured
from symrc4.cipher import ops
from symrc4.core.types import as_bytes, free_bytes


def known_vectors() -> None:
    """Encrypt the published test vectors."""
    for key, plaintext in [("Key", "Plaintext"), ("Wiki", "pedia"), ("Secret", "Attack at dawn")]:
        ciphertext = encrypt(key, plaintext)
        print(f"{key!r:10} {plaintext!r:18} {ciphertext.hex()}")
        assert decrypt_text(key, ciphertext) == plaintext


def symbolic_plaintext() -> None:
    """Concrete key, symbolic plaintext: the ciphertext is a formula."""
    ciphertext = ops.encrypt(as_bytes("Key"), free_bytes("pt", 3))
    for byte in ciphertext:
        print(byte.expr)


def round_trip_proof() -> None:
    """Prove decrypt(encrypt(k, p)) == p for the lengths in the nearest config
    (5-byte key and plaintext by default)."""
    config = load_config()
    config.output.verbose = True
    verdict = prove_configured(config)
    print(verdict.format())


if __name__ == "__main__":
    known_vectors()
    symbolic_plaintext()
    round_trip_proof()
