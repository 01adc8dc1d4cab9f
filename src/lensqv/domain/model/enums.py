"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class Domain(StrEnum):
    """Analytical domains, one rule pack each, in fixed evaluation order."""

    LEGAL = "legal"
    FINANCIAL = "financial"
    BEHAVIORAL = "behavioral"
    TIMELINE = "timeline"
    FORENSIC = "forensic"
    ETHICS = "ethics"


class LensRole(StrEnum):
    """Reportable lenses over which consensus is computed."""

    LEGAL = "legal"
    RISK = "risk"
    TIMELINE = "timeline"
    ETHICS = "ethics"
