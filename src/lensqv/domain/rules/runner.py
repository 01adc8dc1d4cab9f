"""Apply a whole rule pack to a batch of evidence files."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .matcher import matches

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lensqv.domain.model import Claim, EvidenceFile

    from .pack import RulePackStore


log = getLogger(__name__)


def run_ruleset(
    domain_key: str,
    files: Iterable[EvidenceFile],
    *,
    store: RulePackStore,
) -> tuple[Claim, ...]:
    """Emit one claim per (file, matching rule) in file-major, rule-minor order.

    Raises ``UnknownDomainError`` when ``domain_key`` has no registered pack.
    """

    pack = store.pack_for(domain_key)
    claims: list[Claim] = []
    for file in files:
        for rule in pack.rules:
            if matches(rule, file):
                claims.append(rule.emit.build(source=file.name))
    log.debug("Rule pack %s emitted %s claims", domain_key, len(claims))
    return tuple(claims)
