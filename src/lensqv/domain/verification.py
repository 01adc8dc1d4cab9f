"""Offline quadruple verification (QV).

Every domain rule pack runs over the evidence batch, four of the six domain
results are mapped onto the reportable lenses, and consensus is computed over
those four lenses only. Financial and forensic claims are surfaced as
supplementary ``extra`` data and never vote.

The risk lens is sourced from the behavioral rule pack.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from lensqv.domain.consensus import ConsensusResult, LensOutput, compute_consensus
from lensqv.domain.model import Domain, LensRole
from lensqv.domain.rules import run_ruleset

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from lensqv.domain.model import Claim, EvidenceFile
    from lensqv.domain.rules import RulePackStore


log = getLogger(__name__)

QV_DOMAINS: Final[tuple[Domain, ...]] = (
    Domain.LEGAL,
    Domain.FINANCIAL,
    Domain.BEHAVIORAL,
    Domain.TIMELINE,
    Domain.FORENSIC,
    Domain.ETHICS,
)

LENS_SOURCES: Final[Mapping[LensRole, Domain]] = MappingProxyType(
    {
        LensRole.LEGAL: Domain.LEGAL,
        LensRole.RISK: Domain.BEHAVIORAL,
        LensRole.TIMELINE: Domain.TIMELINE,
        LensRole.ETHICS: Domain.ETHICS,
    }
)

EXTRA_DOMAINS: Final[tuple[Domain, ...]] = (Domain.FORENSIC, Domain.FINANCIAL)


@dataclass(frozen=True, slots=True, kw_only=True)
class QVResult:
    lens_outputs: tuple[LensOutput, ...]
    consensus: ConsensusResult
    extra: Mapping[Domain, tuple[Claim, ...]] = field(
        default_factory=dict["Domain", "tuple[Claim, ...]"]
    )

    def lens(self, role: LensRole) -> LensOutput:
        for output in self.lens_outputs:
            if output.role is role:
                return output
        raise KeyError(role)


def run_domains(
    files: tuple[EvidenceFile, ...],
    *,
    store: RulePackStore,
    max_workers: int | None = None,
) -> dict[Domain, tuple[Claim, ...]]:
    """Run every QV domain, re-assembled in ``QV_DOMAINS`` order.

    With ``max_workers`` the domain runs execute on a thread pool; they share
    only read-only inputs.
    """

    if max_workers is None or max_workers <= 1:
        results = [run_ruleset(domain.value, files, store=store) for domain in QV_DOMAINS]
    else:
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="lensqv") as pool:
            futures = [
                pool.submit(run_ruleset, domain.value, files, store=store)
                for domain in QV_DOMAINS
            ]
            results = [future.result() for future in futures]
    return dict(zip(QV_DOMAINS, results, strict=True))


def run_offline_qv(
    files: Iterable[EvidenceFile],
    *,
    store: RulePackStore,
    max_workers: int | None = None,
) -> QVResult:
    """Run all rule packs over ``files`` and compute four-lens consensus."""

    batch = tuple(files)
    by_domain = run_domains(batch, store=store, max_workers=max_workers)

    lens_outputs = tuple(
        LensOutput(role=role, ok=True, claims=by_domain[domain])
        for role, domain in LENS_SOURCES.items()
    )
    consensus = compute_consensus(lens_outputs)
    extra = MappingProxyType({domain: by_domain[domain] for domain in EXTRA_DOMAINS})

    log.info(
        "Offline QV over %s files: majority=%s, conflicts=%s, hard_contradiction=%s, score=%s",
        len(batch),
        len(consensus.majority_clusters),
        len(consensus.conflicts),
        consensus.has_hard_contradiction,
        consensus.score,
    )
    return QVResult(lens_outputs=lens_outputs, consensus=consensus, extra=extra)
