"""Translate validated rule-pack documents into domain rule packs."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from lensqv.domain.model import normalize_extension
from lensqv.domain.rules import EmitTemplate, MatchRule, MatchSpec, RulePack

if TYPE_CHECKING:
    from .schema import EmitModel, MatchModel, RulePackDocument


def translate_rule_pack(domain_key: str, document: RulePackDocument) -> RulePack:
    rules = tuple(
        MatchRule(
            rule_id=rule.id or f"{domain_key}-{index}",
            match=_build_match_spec(rule.match),
            emit=_build_emit_template(rule.emit),
        )
        for index, rule in enumerate(document.rules, start=1)
    )
    return RulePack(domain=domain_key, rules=rules)


def _build_match_spec(match: MatchModel) -> MatchSpec:
    return MatchSpec(
        extensions=(
            frozenset(normalize_extension(ext) for ext in match.ext)
            if match.ext is not None
            else None
        ),
        any_phrases=_lowered(match.any_phrases),
        all_phrases=_lowered(match.all_phrases),
        pattern=re.compile(match.regex, re.IGNORECASE) if match.regex is not None else None,
    )


def _build_emit_template(emit: EmitModel) -> EmitTemplate:
    return EmitTemplate(
        subject=emit.subject,
        predicate=emit.predicate,
        object=emit.object,
        confidence=emit.confidence,
        statute=emit.statute,
    )


def _lowered(phrases: list[str] | None) -> tuple[str, ...] | None:
    if phrases is None:
        return None
    return tuple(phrase.lower() for phrase in phrases)
