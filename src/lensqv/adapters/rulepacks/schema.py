"""Pydantic models describing declarative rule-pack documents.

A pack document looks like::

    {"rules": [{"id": "...", "match": {"ext": [...], "anyPhrases": [...],
                "allPhrases": [...], "regex": "..."},
                "emit": {"subject": "...", "predicate": "...", "object": "...",
                         "confidence": 0.8, "statute": "..."}}]}
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RulePackBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)


class MatchModel(RulePackBaseModel):
    ext: list[str] | None = Field(default=None, min_length=1)
    any_phrases: list[str] | None = Field(default=None, alias="anyPhrases", min_length=1)
    all_phrases: list[str] | None = Field(default=None, alias="allPhrases", min_length=1)
    regex: str | None = Field(default=None, min_length=1)

    @field_validator("ext")
    @classmethod
    def _reject_blank_extensions(cls, value: list[str] | None) -> list[str] | None:
        if value is not None and any(not item.strip().lstrip(".") for item in value):
            raise ValueError("extensions must be non-blank")
        return value

    @field_validator("regex")
    @classmethod
    def _require_compilable(cls, value: str | None) -> str | None:
        if value is None:
            return value
        try:
            re.compile(value, re.IGNORECASE)
        except re.error as exc:
            raise ValueError(f"unparsable regex {value!r}: {exc}") from exc
        return value


class EmitModel(RulePackBaseModel):
    subject: str = Field(min_length=1)
    predicate: str = Field(min_length=1)
    object: str = Field(min_length=1)
    confidence: float = Field(ge=0.0, le=1.0, allow_inf_nan=False)
    statute: str | None = None


class RuleModel(RulePackBaseModel):
    id: str | None = None
    match: MatchModel = Field(default_factory=MatchModel)
    emit: EmitModel


class RulePackDocument(RulePackBaseModel):
    domain: str | None = None
    rules: list[RuleModel] = Field(default_factory=list["RuleModel"])
