"""Correctness proofs for the symbolic RC4 pipeline.

The prover allocates free key and plaintext bytes, pushes them through the
same key schedule and key stream used for concrete encryption, and asks the
solver whether a claim holds for every assignment. The default claim is the
round trip ``decrypt(key, encrypt(key, pt)) == pt``.

Example:
    >>> from symrc4.verification.prover import RoundTripProver
    >>> RoundTripProver(key_length=5, plaintext_length=5).prove().format()
    'Q.E.D.'
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

import z3

from symrc4.cipher.key_schedule import check_key_length
from symrc4.cipher.keystream import KeyStream
from symrc4.cipher.ops import xor_with_stream
from symrc4.config import ProverConfig, Rc4Config, load_config
from symrc4.core.solver import Verdict, solve
from symrc4.core.types import SymbolicByte, free_bytes
from symrc4.logging import get_logger

Claim = Callable[[Sequence[SymbolicByte], Sequence[SymbolicByte]], z3.BoolRef]


def round_trip_claim(key: Sequence[SymbolicByte], plaintext: Sequence[SymbolicByte]) -> z3.BoolRef:
    """Encrypting then decrypting with the same key returns the plaintext."""
    ciphertext = xor_with_stream(KeyStream(key), plaintext)
    recovered = xor_with_stream(KeyStream(key), ciphertext)
    same = [r.equals(p) for r, p in zip(recovered, plaintext)]
    if not same:
        return z3.BoolVal(True)
    return z3.And(same)


class RoundTripProver:
    """Builds and discharges claims over free key and plaintext bytes."""

    def __init__(
        self,
        key_length: int = 5,
        plaintext_length: int = 5,
        timeout_ms: int | None = None,
    ) -> None:
        if plaintext_length < 0:
            raise ValueError(f"Plaintext length must be non-negative: {plaintext_length}")
        self.key_length = key_length
        self.plaintext_length = plaintext_length
        self.timeout_ms = timeout_ms

    @staticmethod
    def from_config(config: Rc4Config | ProverConfig) -> RoundTripProver:
        if isinstance(config, Rc4Config):
            config = config.prover
        return RoundTripProver(config.key_length, config.plaintext_length, config.timeout_ms)

    def free_variables(self) -> tuple[list[SymbolicByte], list[SymbolicByte]]:
        """Fresh key bytes ``key_*`` and plaintext bytes ``pt_*``."""
        key = free_bytes("key", self.key_length)
        check_key_length(key)
        return key, free_bytes("pt", self.plaintext_length)

    def build(self, claim: Claim = round_trip_claim) -> z3.BoolRef:
        """Instantiate ``claim`` over fresh free variables."""
        key, plaintext = self.free_variables()
        return claim(key, plaintext)

    def prove(self, claim: Claim = round_trip_claim) -> Verdict:
        """Build ``claim`` and hand it to the solver (blocking)."""
        logger = get_logger()
        logger.verbose(
            f"proving over {self.key_length}-byte key, {self.plaintext_length}-byte plaintext",
            category="prover",
        )
        with logger.timer("build obligation", category="prover"):
            formula = self.build(claim)
        with logger.timer("solve", category="prover"):
            verdict = solve(formula, self.timeout_ms)
        if verdict.is_proved:
            logger.success(verdict.format())
        else:
            logger.info(verdict.format(), category="prover")
        return verdict


def prove_claim(
    claim: Claim,
    key_length: int,
    plaintext_length: int,
    *,
    timeout_ms: int | None = None,
) -> Verdict:
    """Prove an arbitrary claim over free key and plaintext bytes."""
    return RoundTripProver(key_length, plaintext_length, timeout_ms).prove(claim)


def prove_round_trip(
    key_length: int,
    plaintext_length: int,
    *,
    timeout_ms: int | None = None,
) -> Verdict:
    """Prove that RC4 decryption inverts encryption for all keys and plaintexts
    of the given byte lengths."""
    return prove_claim(round_trip_claim, key_length, plaintext_length, timeout_ms=timeout_ms)


def prove_configured(config: Rc4Config | None = None, claim: Claim = round_trip_claim) -> Verdict:
    """Prove ``claim`` using the prover and output settings of ``config``.

    Without a config, the nearest ``symrc4.toml``, ``.symrc4.toml`` or
    ``[tool.symrc4]`` table is loaded (defaults if none is found).
    """
    if config is None:
        config = load_config()
    config.output.apply()
    return RoundTripProver.from_config(config).prove(claim)


__all__ = [
    "Claim",
    "round_trip_claim",
    "RoundTripProver",
    "prove_claim",
    "prove_round_trip",
    "prove_configured",
]
