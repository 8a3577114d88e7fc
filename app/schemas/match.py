from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from app.schemas.analysis import ParsedAnalysis

ScoreBand = Literal["strong", "moderate", "weak"]
SessionStateName = Literal["idle", "file_selected", "analyzing", "complete", "failed"]
SessionEventName = Literal["file_selected", "analysis_requested", "analysis_succeeded", "analysis_failed", "reset"]


class AnalysisView(BaseModel):
    analysis: ParsedAnalysis
    analysis_html: str
    improved_resume_html: str
    score_band: ScoreBand


class MatchResponse(AnalysisView):
    llm: str
    llm_name: str
    model: str
    ai_analysis: str
    improved_resume: str
    potential_improvement: int = Field(ge=0, le=100)
    resume_chars: int
    session_id: str | None = None
    generated_at: datetime


class ParseRequest(BaseModel):
    analysis_text: str = Field(default="", max_length=200000)
    improved_resume_text: str = Field(default="", max_length=200000)


class ParseResponse(AnalysisView):
    generated_at: datetime


class ModelInfo(BaseModel):
    id: str
    name: str
    provider_model: str


class ModelsResponse(BaseModel):
    default: str
    models: list[ModelInfo] = Field(default_factory=list)


class SessionEventRequest(BaseModel):
    event: SessionEventName


class SessionResponse(BaseModel):
    session_id: str
    state: SessionStateName
    error: str | None = None
    result: MatchResponse | None = None
    updated_at: datetime
