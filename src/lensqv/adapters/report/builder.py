"""Convert QV results into report payloads for renderers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .schema import (
    ClaimPayload,
    ClusterPayload,
    ConflictGroupPayload,
    ConsensusPayload,
    LensPayload,
    ReportPayload,
)

if TYPE_CHECKING:
    from lensqv.domain.consensus import ClaimCluster, ConflictGroup, ConsensusResult
    from lensqv.domain.model import Claim
    from lensqv.domain.verification import QVResult


def summary_line(consensus: ConsensusResult) -> str:
    return (
        f"Majority clusters: {len(consensus.majority_clusters)} | "
        f"Conflicts: {len(consensus.conflicts)}"
    )


def build_report_payload(result: QVResult) -> ReportPayload:
    return ReportPayload(
        lenses=[
            LensPayload(
                role=lens.role.value,
                ok=lens.ok,
                claims=[_claim_payload(claim) for claim in lens.claims],
            )
            for lens in result.lens_outputs
        ],
        consensus=ConsensusPayload(
            majority=[_cluster_payload(cluster) for cluster in result.consensus.majority_clusters],
            conflicts=[_conflict_payload(group) for group in result.consensus.conflicts],
            hard_contradiction=result.consensus.has_hard_contradiction,
            score=result.consensus.score,
        ),
        extra={
            domain.value: [_claim_payload(claim) for claim in claims]
            for domain, claims in result.extra.items()
        },
        summary=summary_line(result.consensus),
    )


def render_report_json(result: QVResult, *, indent: int | None = 2) -> str:
    """Serialise ``result`` to JSON; identical results give identical text."""

    return build_report_payload(result).model_dump_json(indent=indent)


def _claim_payload(claim: Claim) -> ClaimPayload:
    return ClaimPayload(
        subject=claim.subject,
        predicate=claim.predicate,
        object=claim.object,
        confidence=claim.confidence,
        statute=claim.statute,
        source=claim.source,
    )


def _cluster_payload(cluster: ClaimCluster) -> ClusterPayload:
    return ClusterPayload(
        claim=_claim_payload(cluster.representative_claim),
        votes=cluster.vote_count,
        mean_confidence=cluster.mean_confidence,
    )


def _conflict_payload(group: ConflictGroup) -> ConflictGroupPayload:
    subject, predicate = group.group_key
    return ConflictGroupPayload(
        subject=subject,
        predicate=predicate,
        conflicts=[
            (_claim_payload(first), _claim_payload(second)) for first, second in group.conflicts
        ],
    )
