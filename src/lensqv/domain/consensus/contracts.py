"""Value objects shared by contradiction detection and consensus scoring.

All of these are derived fresh on each run and carry no identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, TypeAlias

if TYPE_CHECKING:
    from lensqv.domain.model import Claim, LensRole

MAJORITY_MIN_VOTES: Final[int] = 3
MAJORITY_MIN_CONFIDENCE: Final[float] = 0.70
CONFIDENCE_PRECISION: Final[int] = 6

ConflictPair: TypeAlias = "tuple[Claim, Claim]"


@dataclass(frozen=True, slots=True, kw_only=True)
class LensOutput:
    role: LensRole
    claims: tuple[Claim, ...] = ()
    ok: bool = True


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictGroup:
    """Claims sharing ``(subject, predicate)`` with pairwise differing objects."""

    group_key: tuple[str, str]
    conflicts: tuple[ConflictPair, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class ClaimCluster:
    """Identical ``(subject, predicate, object)`` claims collapsed into one vote tally."""

    representative_claim: Claim
    vote_count: int
    mean_confidence: float

    @property
    def is_majority(self) -> bool:
        return (
            self.vote_count >= MAJORITY_MIN_VOTES
            and self.mean_confidence >= MAJORITY_MIN_CONFIDENCE
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class ConsensusResult:
    majority_clusters: tuple[ClaimCluster, ...]
    conflicts: tuple[ConflictGroup, ...]
    has_hard_contradiction: bool
    score: float
