"""Pydantic models for the structured report handed to renderers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ReportBaseModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class ClaimPayload(ReportBaseModel):
    subject: str
    predicate: str
    object: str
    confidence: float
    statute: str | None = None
    source: str


class LensPayload(ReportBaseModel):
    role: str
    ok: bool
    claims: list[ClaimPayload] = Field(default_factory=list["ClaimPayload"])


class ClusterPayload(ReportBaseModel):
    claim: ClaimPayload
    votes: int
    mean_confidence: float


class ConflictGroupPayload(ReportBaseModel):
    subject: str
    predicate: str
    conflicts: list[tuple[ClaimPayload, ClaimPayload]] = Field(
        default_factory=list["tuple[ClaimPayload, ClaimPayload]"]
    )


class ConsensusPayload(ReportBaseModel):
    majority: list[ClusterPayload] = Field(default_factory=list["ClusterPayload"])
    conflicts: list[ConflictGroupPayload] = Field(default_factory=list["ConflictGroupPayload"])
    hard_contradiction: bool
    score: float


class ReportPayload(ReportBaseModel):
    lenses: list[LensPayload]
    consensus: ConsensusPayload
    extra: dict[str, list[ClaimPayload]] = Field(default_factory=dict)
    summary: str
