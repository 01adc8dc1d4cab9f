from __future__ import annotations

import pytest

from lensqv.adapters.rulepacks import load_rule_packs
from lensqv.domain.rules import RulePackStore


def _emit(subject: str, predicate: str, obj: str, confidence: float = 0.8) -> dict[str, object]:
    return {"subject": subject, "predicate": predicate, "object": obj, "confidence": confidence}


SAMPLE_PACKS: dict[str, object] = {
    "legal": {
        "rules": [
            {
                "id": "legal-breach",
                "match": {"anyPhrases": ["breach of contract"]},
                "emit": {**_emit("agreement", "status", "breached"), "statute": "Contract law"},
            },
            {
                "id": "legal-pdf-signed",
                "match": {"ext": ["pdf"], "allPhrases": ["signed", "witnessed"]},
                "emit": _emit("agreement", "execution", "valid", 0.9),
            },
        ]
    },
    "financial": [
        {
            "match": {"anyPhrases": ["invoice"]},
            "emit": _emit("invoice", "has_amount", "present", 0.7),
        }
    ],
    "behavioral": [
        {
            "match": {"anyPhrases": ["breach of contract"]},
            "emit": _emit("agreement", "status", "breached"),
        },
        {
            "match": {"regex": r"\bno comment\b"},
            "emit": _emit("respondent", "behaviour", "evasive", 0.7),
        },
    ],
    "timeline": [
        {
            "match": {"anyPhrases": ["breach of contract"]},
            "emit": _emit("agreement", "status", "breached"),
        },
        {
            "match": {"anyPhrases": ["agreement remains in force"]},
            "emit": _emit("agreement", "status", "active", 0.9),
        },
    ],
    "forensic": [
        {
            "match": {"ext": ["eml"], "allPhrases": ["received:"]},
            "emit": _emit("email", "headers", "present", 0.9),
        }
    ],
    "ethics": [
        {
            "match": {"anyPhrases": ["breach of contract"]},
            "emit": _emit("agreement", "status", "breached"),
        }
    ],
}


@pytest.fixture
def sample_packs() -> dict[str, object]:
    return SAMPLE_PACKS


@pytest.fixture
def rule_store() -> RulePackStore:
    return load_rule_packs(SAMPLE_PACKS)
