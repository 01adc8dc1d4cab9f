"""Rule primitives and the read-only rule-pack store.

Rules are flat declarative data: a match specification with optional
conditions and an emit template describing the claim to produce. Packs are
built once at load time by ``lensqv.adapters.rulepacks`` and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from lensqv.config.errors import InvalidRulePackError, UnknownDomainError
from lensqv.domain.model import Claim

if TYPE_CHECKING:
    import re
    from collections.abc import Iterable, Mapping


@dataclass(frozen=True, slots=True, kw_only=True)
class MatchSpec:
    """Conditions a file must satisfy; ``None`` means the condition is not declared.

    ``extensions`` and phrases are stored lower-cased. ``pattern`` is compiled
    case-insensitive.
    """

    extensions: frozenset[str] | None = None
    any_phrases: tuple[str, ...] | None = None
    all_phrases: tuple[str, ...] | None = None
    pattern: re.Pattern[str] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class EmitTemplate:
    subject: str
    predicate: str
    object: str
    confidence: float
    statute: str | None = None

    def build(self, *, source: str) -> Claim:
        return Claim(
            subject=self.subject,
            predicate=self.predicate,
            object=self.object,
            confidence=self.confidence,
            statute=self.statute,
            source=source,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class MatchRule:
    rule_id: str
    match: MatchSpec
    emit: EmitTemplate


@dataclass(frozen=True, slots=True)
class RulePack:
    """Ordered rules for one analytical domain."""

    domain: str
    rules: tuple[MatchRule, ...] = ()

    def __len__(self) -> int:
        return len(self.rules)


@dataclass(frozen=True, slots=True)
class RulePackStore:
    """Domain key to rule pack lookup, fixed after construction."""

    _packs: Mapping[str, RulePack] = field(default_factory=dict["str", "RulePack"], repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_packs", MappingProxyType(dict(self._packs)))

    @classmethod
    def from_packs(cls, packs: Iterable[RulePack]) -> RulePackStore:
        by_domain: dict[str, RulePack] = {}
        for pack in packs:
            if pack.domain in by_domain:
                raise InvalidRulePackError(pack.domain, "duplicate rule pack")
            by_domain[pack.domain] = pack
        return cls(by_domain)

    @property
    def domains(self) -> tuple[str, ...]:
        return tuple(self._packs)

    def __contains__(self, domain_key: object) -> bool:
        return domain_key in self._packs

    def pack_for(self, domain_key: str) -> RulePack:
        pack = self._packs.get(domain_key)
        if pack is None:
            raise UnknownDomainError(domain_key)
        return pack
