"""Claim primitives produced by rule packs and consumed by consensus scoring.

A claim is an atomic ``(subject, predicate, object)`` assertion with a
confidence score. ``source`` always names the evidence file that produced it so
every conclusion can be traced back to evidence.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import InvalidInputError


def require_confidence(value: object, *, context: str = "claim") -> float:
    """Return ``value`` as a float in ``[0, 1]`` or raise ``InvalidInputError``."""

    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidInputError(f"{context}: confidence must be a number", field="confidence")
    confidence = float(value)
    if not math.isfinite(confidence) or not 0.0 <= confidence <= 1.0:
        raise InvalidInputError(
            f"{context}: confidence {value!r} is outside [0, 1]", field="confidence"
        )
    return confidence


@dataclass(frozen=True, slots=True, kw_only=True)
class Claim:
    subject: str
    predicate: str
    object: str
    confidence: float
    source: str
    statute: str | None = None

    def __post_init__(self) -> None:
        for field_name in ("subject", "predicate", "object", "source"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value:
                raise InvalidInputError(
                    f"Claim requires a non-empty {field_name}", field=field_name
                )
        require_confidence(self.confidence, context=f"claim {self.subject}/{self.predicate}")

    @property
    def group_key(self) -> tuple[str, str]:
        """Key used for contradiction grouping."""

        return (self.subject, self.predicate)

    @property
    def identity_key(self) -> tuple[str, str, str]:
        """Key used for consensus clustering."""

        return (self.subject, self.predicate, self.object)
