"""Turn raw ingestion records and text files into evidence files.

One malformed or unreadable record never blocks the rest of a batch: it is
logged and skipped.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from lensqv.domain.model import EvidenceFile, InvalidInputError

from .schema import EvidenceRecord

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path


log = getLogger(__name__)


def parse_evidence_record(record: EvidenceRecord | Mapping[str, object]) -> EvidenceFile:
    """Validate one record, raising ``InvalidInputError`` when it is malformed."""

    try:
        payload = (
            record
            if isinstance(record, EvidenceRecord)
            else EvidenceRecord.model_validate(record)
        )
    except ValidationError as exc:
        raise InvalidInputError(f"Malformed evidence record: {exc}") from exc
    return EvidenceFile(
        name=payload.name,
        extension=payload.extension,
        normalized_text=payload.text,
    )


def parse_evidence_records(
    records: Iterable[EvidenceRecord | Mapping[str, object]],
) -> tuple[EvidenceFile, ...]:
    files: list[EvidenceFile] = []
    for index, record in enumerate(records):
        try:
            files.append(parse_evidence_record(record))
        except InvalidInputError as exc:
            log.warning("Skipping evidence record #%s: %s", index, exc)
    return tuple(files)


def read_evidence_file(path: Path) -> EvidenceFile:
    """Read a plain-text evidence file; undecodable bytes are replaced."""

    text = path.read_text(encoding="utf-8", errors="replace")
    return EvidenceFile.from_name(path.name, text)


def read_evidence_files(paths: Iterable[Path]) -> tuple[EvidenceFile, ...]:
    files: list[EvidenceFile] = []
    for path in paths:
        try:
            files.append(read_evidence_file(path))
        except OSError as exc:
            log.warning("Skipping unreadable evidence file %s: %s", path, exc)
    log.info("Ingested %s evidence files", len(files))
    return tuple(files)
