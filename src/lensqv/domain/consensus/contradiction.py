"""Cross-lens contradiction detection.

Claims are grouped by ``(subject, predicate)``; within a group every pair with
differing objects is reported. The definition is pairwise and non-transitive:
three distinct objects yield three pairs, not one three-way record.
"""

from __future__ import annotations

from itertools import combinations
from typing import TYPE_CHECKING, TypeVar

from .contracts import ConflictGroup

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Iterable

    from lensqv.domain.model import Claim

K = TypeVar("K", bound="Hashable")


def group_claims(
    claims: Iterable[Claim], key: Callable[[Claim], K]
) -> dict[K, list[Claim]]:
    """Bucket ``claims`` by ``key`` preserving first-seen key order."""

    groups: dict[K, list[Claim]] = {}
    for claim in claims:
        groups.setdefault(key(claim), []).append(claim)
    return groups


def find_conflicts(claims: Iterable[Claim]) -> tuple[ConflictGroup, ...]:
    """Return conflict groups in first-seen group order, omitting conflict-free groups."""

    results: list[ConflictGroup] = []
    for group_key, members in group_claims(claims, _group_key).items():
        pairs = tuple(
            (first, second)
            for first, second in combinations(members, 2)
            if first.object != second.object
        )
        if pairs:
            results.append(ConflictGroup(group_key=group_key, conflicts=pairs))
    return tuple(results)


def _group_key(claim: Claim) -> tuple[str, str]:
    return claim.group_key
