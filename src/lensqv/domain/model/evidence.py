"""Evidence files as supplied by the ingestion layer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath

from .errors import InvalidInputError


def normalize_extension(extension: str) -> str:
    """Lower-case an extension and drop any leading dots (``".PDF"`` -> ``"pdf"``)."""

    return extension.strip().lstrip(".").lower()


@dataclass(frozen=True, slots=True)
class EvidenceFile:
    """One uploaded artifact reduced to its extracted plain text.

    ``extension`` is kept as supplied; matching lower-cases it.
    """

    name: str
    extension: str
    normalized_text: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidInputError("Evidence file requires a non-blank name", field="name")
        if not isinstance(self.extension, str):
            raise InvalidInputError(
                f"Evidence file {self.name!r} has a non-string extension", field="extension"
            )
        if not isinstance(self.normalized_text, str):
            raise InvalidInputError(
                f"Evidence file {self.name!r} has non-text content", field="normalized_text"
            )

    @property
    def lowered_extension(self) -> str:
        return normalize_extension(self.extension)

    @classmethod
    def from_name(cls, name: str, text: str) -> EvidenceFile:
        """Build an evidence file, deriving the extension from ``name``."""

        return cls(name=name, extension=PurePath(name).suffix, normalized_text=text)
