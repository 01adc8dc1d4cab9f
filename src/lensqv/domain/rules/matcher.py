"""Decide whether a single rule matches a single evidence file."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lensqv.domain.model import EvidenceFile

    from .pack import MatchRule


def matches(rule: MatchRule, file: EvidenceFile) -> bool:
    """Return ``True`` iff every condition declared by ``rule`` holds for ``file``.

    Extension and phrase checks compare lower-cased values; the regex runs
    against the original text in case-insensitive mode. Undeclared conditions
    are vacuously satisfied.
    """

    spec = rule.match
    if spec.extensions is not None and file.lowered_extension not in spec.extensions:
        return False

    text = file.normalized_text.lower()
    if spec.any_phrases is not None and not any(phrase in text for phrase in spec.any_phrases):
        return False
    if spec.all_phrases is not None and not all(phrase in text for phrase in spec.all_phrases):
        return False
    return spec.pattern is None or spec.pattern.search(file.normalized_text) is not None
