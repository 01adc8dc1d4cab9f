from __future__ import annotations

import pytest

from lensqv.domain.model import EvidenceFile, InvalidInputError, normalize_extension


def test_from_name_derives_extension() -> None:
    file = EvidenceFile.from_name("Contract.PDF", "text")

    assert file.extension == ".PDF"
    assert file.lowered_extension == "pdf"


def test_from_name_without_suffix_has_empty_extension() -> None:
    file = EvidenceFile.from_name("README", "text")

    assert file.lowered_extension == ""


@pytest.mark.parametrize(("raw", "expected"), [("PDF", "pdf"), (".Txt", "txt"), (" eml ", "eml")])
def test_normalize_extension(raw: str, expected: str) -> None:
    assert normalize_extension(raw) == expected


def test_evidence_file_requires_name() -> None:
    with pytest.raises(InvalidInputError, match="name"):
        EvidenceFile(name="  ", extension="txt", normalized_text="text")


def test_evidence_file_requires_text() -> None:
    with pytest.raises(InvalidInputError) as exc:
        EvidenceFile(name="a.txt", extension="txt", normalized_text=None)  # pyright: ignore[reportArgumentType]

    assert exc.value.field == "normalized_text"
