"""Declarative rule packs and their evaluation against evidence files."""

from __future__ import annotations

from .matcher import matches
from .pack import EmitTemplate, MatchRule, MatchSpec, RulePack, RulePackStore
from .runner import run_ruleset

__all__ = [
    "EmitTemplate",
    "MatchRule",
    "MatchSpec",
    "RulePack",
    "RulePackStore",
    "matches",
    "run_ruleset",
]
