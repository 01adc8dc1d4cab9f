"""Pydantic models for evidence records handed over by the ingestion layer."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class EvidenceRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    name: str = Field(min_length=1)
    extension: str = Field(validation_alias=AliasChoices("extension", "ext"))
    text: str = Field(validation_alias=AliasChoices("text", "normalizedText", "normalized_text"))
