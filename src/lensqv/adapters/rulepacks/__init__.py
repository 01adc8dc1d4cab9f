"""Declarative rule-pack adapter."""

from __future__ import annotations

from .loader import (
    REQUIRED_DOMAINS,
    load_default_rule_packs,
    load_rule_pack_dir,
    load_rule_packs,
    parse_rule_pack,
)
from .schema import EmitModel, MatchModel, RuleModel, RulePackDocument

__all__ = [
    "REQUIRED_DOMAINS",
    "EmitModel",
    "MatchModel",
    "RuleModel",
    "RulePackDocument",
    "load_default_rule_packs",
    "load_rule_pack_dir",
    "load_rule_packs",
    "parse_rule_pack",
]
