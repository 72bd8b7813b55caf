"""symrc4: RC4 over symbolic bytes.
The cipher runs on values that are either concrete bytes or Z3 terms, so
the same code encrypts test vectors and produces formulas whose properties
the Z3 theorem prover can establish for every key and plaintext.
Example:
    >>> from symrc4 import encrypt, prove_round_trip
    >>> encrypt("Key", "Plaintext").hex()
    'bbf316e8d940af0ad3'
    >>> prove_round_trip(5, 5).is_proved
    True
"""

from symrc4.api import (
    decrypt,
    decrypt_text,
    encrypt,
    key_stream_bytes,
    prove_claim,
    prove_configured,
    prove_round_trip,
    to_hex,
)
from symrc4.cipher.key_schedule import init_rc4, swap
from symrc4.cipher.keystream import CipherState, KeyStream, key_stream, prga_step
from symrc4.core.errors import ArrayShapeError, ConcreteValueError, KeyLengthError
from symrc4.core.solver import Verdict, VerdictKind, solve
from symrc4.core.symbolic_array import SymbolicArray
from symrc4.core.types import SymbolicByte
from symrc4.verification.prover import RoundTripProver, round_trip_claim

__version__ = "0.1.0"
from symrc4.config import Rc4Config, load_config
from symrc4.logging import LogLevel, configure_logging, get_logger
