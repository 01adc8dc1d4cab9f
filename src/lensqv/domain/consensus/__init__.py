"""Contradiction detection and majority-consensus scoring."""

from __future__ import annotations

from .contracts import (
    CONFIDENCE_PRECISION,
    MAJORITY_MIN_CONFIDENCE,
    MAJORITY_MIN_VOTES,
    ClaimCluster,
    ConflictGroup,
    ConsensusResult,
    LensOutput,
)
from .contradiction import find_conflicts
from .scoring import cluster_claims, compute_consensus

__all__ = [
    "CONFIDENCE_PRECISION",
    "MAJORITY_MIN_CONFIDENCE",
    "MAJORITY_MIN_VOTES",
    "ClaimCluster",
    "ConflictGroup",
    "ConsensusResult",
    "LensOutput",
    "cluster_claims",
    "compute_consensus",
    "find_conflicts",
]
