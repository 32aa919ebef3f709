"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pigsight.engine.tallies import GroupTallies
from pigsight.models.detection import Evidence, PersonalityTrait


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    rules_registered: int = 0
    analyzer_configured: bool = False


class AnalysisMetadata(BaseModel):
    detection_count: int = 0
    processing_time_ms: float = 0.0


class TraitsResponse(BaseModel):
    summary: str
    traits: list[PersonalityTrait] = Field(default_factory=list)
    evidence: list[Evidence] = Field(default_factory=list)


class AnalyzeResponse(TraitsResponse):
    id: str
    accepted: bool = True
    description: str | None = None
    rejection: str | None = None
    metadata: AnalysisMetadata = Field(default_factory=AnalysisMetadata)


class GroupTalliesResponse(BaseModel):
    tallies: GroupTallies
    participant_count: int = 0
    discussion_prompts: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
    message: str = ""
