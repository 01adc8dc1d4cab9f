"""Majority-consensus scoring over lens outputs.

Stages:
1) flatten claims across lenses (duplicates count as corroboration)
2) detect contradictions over the flattened set
3) cluster identical claims and tally votes and mean confidence
4) keep clusters with enough votes and confidence as the majority
5) score the majority; no majority scores as zero

Means are computed with ``math.fsum`` and rounded to ``CONFIDENCE_PRECISION``
decimal places before threshold comparison so results reproduce exactly.
"""

from __future__ import annotations

import math
from logging import getLogger
from typing import TYPE_CHECKING

from lensqv.domain.model import require_confidence

from .contracts import CONFIDENCE_PRECISION, ClaimCluster, ConsensusResult
from .contradiction import find_conflicts, group_claims

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from lensqv.domain.model import Claim

    from .contracts import LensOutput


log = getLogger(__name__)


def mean_confidence(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return round(math.fsum(values) / len(values), CONFIDENCE_PRECISION)


def cluster_claims(claims: Iterable[Claim]) -> tuple[ClaimCluster, ...]:
    """Collapse claims sharing ``(subject, predicate, object)`` in first-seen order."""

    return tuple(
        ClaimCluster(
            representative_claim=members[0],
            vote_count=len(members),
            mean_confidence=mean_confidence([claim.confidence for claim in members]),
        )
        for members in group_claims(claims, _identity_key).values()
    )


def compute_consensus(lens_outputs: Iterable[LensOutput]) -> ConsensusResult:
    """Combine lens claims into majority clusters and contradiction results.

    Raises ``InvalidInputError`` if any claim carries a confidence outside ``[0, 1]``.
    """

    all_claims = tuple(claim for lens in lens_outputs for claim in lens.claims)
    for claim in all_claims:
        require_confidence(claim.confidence, context=f"claim from {claim.source}")

    conflicts = find_conflicts(all_claims)
    majority = tuple(cluster for cluster in cluster_claims(all_claims) if cluster.is_majority)
    score = mean_confidence([cluster.mean_confidence for cluster in majority])

    log.debug(
        "Consensus over %s claims: majority=%s, conflict_groups=%s, score=%s",
        len(all_claims),
        len(majority),
        len(conflicts),
        score,
    )
    return ConsensusResult(
        majority_clusters=majority,
        conflicts=conflicts,
        has_hard_contradiction=bool(conflicts),
        score=score,
    )


def _identity_key(claim: Claim) -> tuple[str, str, str]:
    return claim.identity_key
