"""Proof drivers for cipher properties."""

from symrc4.verification.prover import (
    RoundTripProver,
    prove_claim,
    prove_configured,
    prove_round_trip,
    round_trip_claim,
)

__all__ = [
    "RoundTripProver",
    "round_trip_claim",
    "prove_claim",
    "prove_round_trip",
    "prove_configured",
]
