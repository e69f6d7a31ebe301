"""
API Schemas — Request and Response Models

Pydantic models for the calmsense API. Nested detector results keep the
camelCase keys the chat pipeline already consumes.
"""

from __future__ import annotations

from typing import Literal, Optional
from pydantic import BaseModel, Field

from calmsense.config import settings


# ============================================================
# ANALYZE
# ============================================================

class AnalyzeRequest(BaseModel):
    """POST /analyze request body."""
    text: str = Field(..., min_length=1, max_length=settings.MAX_MESSAGE_CHARS,
                      description="The chat message to classify.")

    model_config = {"json_schema_extra": {"examples": [
        {"text": "I think I'm having a panic attack and I can't breathe."},
    ]}}


class AnalyzeBatchRequest(BaseModel):
    """POST /analyze/batch request body."""
    items: list[AnalyzeRequest] = Field(..., min_length=1, max_length=settings.BATCH_LIMIT)


class ConditionSummaryResponse(BaseModel):
    score: int
    matches: list[str]
    thresholdMet: bool
    confidence: Literal["low", "medium", "high"]


class AnxietyContextResponse(BaseModel):
    generalAnxiety: ConditionSummaryResponse
    panic: ConditionSummaryResponse
    ptsd: ConditionSummaryResponse
    ocd: ConditionSummaryResponse
    depression: ConditionSummaryResponse
    crisis: ConditionSummaryResponse
    positive: ConditionSummaryResponse


class PsychosisResponse(BaseModel):
    hasIndicators: bool
    matches: list[str]
    confidence: Literal["low", "medium", "high"]


class CrisisAssessmentResponse(BaseModel):
    riskLevel: Literal["none", "low", "moderate", "high", "imminent"]
    requiresScreening: bool
    reasoning: str
    detectedIndicators: list[str]


class AnalyzeResponse(BaseModel):
    """POST /analyze response body."""
    text: str
    context: AnxietyContextResponse
    psychosis: PsychosisResponse
    triggers: list[str]
    cognitive_distortions: list[str]
    crisis: CrisisAssessmentResponse
    anxiety_level: int = Field(..., ge=1, le=10)
    language: Literal["en", "es"]
    requires_crisis_response: bool
    core_version: str


class AnalyzeBatchResponse(BaseModel):
    """POST /analyze/batch response body."""
    results: list[Optional[AnalyzeResponse]]
    total: int
    scanned: int


# ============================================================
# SCREENING
# ============================================================

class ScreeningAnswer(BaseModel):
    question_number: int = Field(..., ge=1, le=6)
    answer: Optional[Literal["yes", "no"]] = None


class ScreeningRequest(BaseModel):
    """POST /screening/next and /screening/assess request body."""
    responses: list[ScreeningAnswer] = Field(default_factory=list, max_length=6)


class NextQuestionResponse(BaseModel):
    question: Optional[str] = None
    question_number: Optional[int] = None
    complete: bool


class ScreeningOutcomeResponse(BaseModel):
    finalRiskLevel: Literal["low", "moderate", "high", "imminent"]
    recommendation: str
    shouldAlert: bool
    message: str


# ============================================================
# HEALTH
# ============================================================

class HealthResponse(BaseModel):
    status: str
    version: str
    core_version: str
    categories: int
    patterns: int
