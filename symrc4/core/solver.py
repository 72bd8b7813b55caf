"""Z3 solver dispatch for symrc4.
This module turns a universally quantified claim into a single blocking
solver call and reports the outcome as a ``Verdict``. Solver failures are
returned, never raised, and nothing is retried here.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum

import z3

from symrc4.logging import get_logger


class VerdictKind(Enum):
    """Possible outcomes of a proof attempt."""

    PROVED = "proved"
    COUNTEREXAMPLE = "counterexample"
    INCONCLUSIVE = "inconclusive"
    ENVIRONMENT_ERROR = "environment_error"


@dataclass
class Verdict:
    """Result of discharging a claim.

    Attributes:
        kind: Which outcome was reached.
        assignment: Concrete values of the free variables that falsify the
            claim (counterexamples only).
        reason: Solver explanation for inconclusive or failed runs.
        elapsed_ms: Wall time spent inside the solver.
    """

    kind: VerdictKind
    assignment: dict[str, int] = field(default_factory=dict)
    reason: str = ""
    elapsed_ms: float = 0.0

    @staticmethod
    def proved() -> Verdict:
        return Verdict(VerdictKind.PROVED)

    @staticmethod
    def counterexample(assignment: dict[str, int]) -> Verdict:
        return Verdict(VerdictKind.COUNTEREXAMPLE, assignment=assignment)

    @staticmethod
    def inconclusive(reason: str) -> Verdict:
        return Verdict(VerdictKind.INCONCLUSIVE, reason=reason)

    @staticmethod
    def environment_error(reason: str) -> Verdict:
        return Verdict(VerdictKind.ENVIRONMENT_ERROR, reason=reason)

    @property
    def is_proved(self) -> bool:
        return self.kind is VerdictKind.PROVED

    def format(self) -> str:
        """One-line human readable summary."""
        if self.kind is VerdictKind.PROVED:
            return "Q.E.D."
        if self.kind is VerdictKind.COUNTEREXAMPLE:
            values = ", ".join(f"{name} = 0x{value:02x}" for name, value in sorted(self.assignment.items()))
            return f"Falsifiable. Counter-example: {values}"
        if self.kind is VerdictKind.INCONCLUSIVE:
            return f"Unknown: {self.reason}"
        return f"Solver error: {self.reason}"

    def to_dict(self) -> dict[str, object]:
        return {
            "kind": self.kind.value,
            "assignment": dict(self.assignment),
            "reason": self.reason,
            "elapsed_ms": self.elapsed_ms,
        }


def model_assignment(model: z3.ModelRef) -> dict[str, int]:
    """Extract ``{name: value}`` for every bit-vector constant in ``model``."""
    result: dict[str, int] = {}
    for decl in model.decls():
        value = model[decl]
        if z3.is_bv_value(value):
            result[decl.name()] = value.as_long()
    return result


def solve(claim: z3.BoolRef, timeout_ms: int | None = None) -> Verdict:
    """Prove ``claim`` valid for every assignment of its free variables.

    Blocks until the solver answers or ``timeout_ms`` elapses (``None`` or
    0 means no limit). The solver searches for a model of ``Not(claim)``:
    unsat means the claim is proved, sat yields a counterexample, unknown
    (including timeout) is inconclusive. A ``Z3Exception`` or ``OSError``
    from the solver becomes an environment-error verdict.
    """
    logger = get_logger()
    check = logger.count("solver checks")
    start = time.perf_counter()
    try:
        solver = z3.Solver()
        if timeout_ms:
            solver.set("timeout", int(timeout_ms))
        solver.add(z3.Not(claim))
        result = solver.check()
        if result == z3.unsat:
            verdict = Verdict.proved()
        elif result == z3.sat:
            verdict = Verdict.counterexample(model_assignment(solver.model()))
        else:
            verdict = Verdict.inconclusive(solver.reason_unknown())
    except (z3.Z3Exception, OSError) as e:
        logger.error(f"Solver failed: {e}")
        verdict = Verdict.environment_error(str(e))
    verdict.elapsed_ms = (time.perf_counter() - start) * 1000
    logger.debug(f"check #{check}: {verdict.kind.value} in {verdict.elapsed_ms:.1f}ms", category="solver")
    return verdict


__all__ = [
    "VerdictKind",
    "Verdict",
    "model_assignment",
    "solve",
]
