"""Core domain model for evidence and claims."""

from __future__ import annotations

from .claims import Claim, require_confidence
from .enums import Domain, LensRole
from .errors import InvalidInputError
from .evidence import EvidenceFile, normalize_extension

__all__ = [
    "Claim",
    "Domain",
    "EvidenceFile",
    "InvalidInputError",
    "LensRole",
    "normalize_extension",
    "require_confidence",
]
