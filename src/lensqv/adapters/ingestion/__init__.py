"""Evidence ingestion adapter."""

from __future__ import annotations

from .reader import (
    parse_evidence_record,
    parse_evidence_records,
    read_evidence_file,
    read_evidence_files,
)
from .schema import EvidenceRecord

__all__ = [
    "EvidenceRecord",
    "parse_evidence_record",
    "parse_evidence_records",
    "read_evidence_file",
    "read_evidence_files",
]
