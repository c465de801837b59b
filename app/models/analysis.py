from __future__ import annotations

from typing import Literal, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

from app.core.config import SCORE_BANDS

Severity = Literal["low", "medium", "high", "critical"]
IssueCategory = Literal[
    "tone", "urgency", "boundary", "clarity", "mental-health",
    "respect", "profanity", "harassment", "discrimination",
]
SuggestionKind = Literal["rewrite", "addition", "removal", "tone-adjustment", "complete-rewrite"]
SuggestionCategory = Literal["profanity", "mental-health", "respect", "clarity", "boundary", "professionalism"]

SEVERITY_RANK = {"low": 0, "medium": 1, "high": 2, "critical": 3}
BLOCKING_CATEGORIES = frozenset({"profanity", "harassment", "discrimination"})


class Span(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: int
    end: int


class Issue(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: IssueCategory
    severity: Severity
    description: str
    span: Optional[Span] = None
    flagged: bool = False


class Suggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: SuggestionKind
    original: str
    suggested: str
    reason: str
    category: SuggestionCategory


def score_band(score: int) -> str:
    if score >= SCORE_BANDS["good"]:
        return "good"
    if score >= SCORE_BANDS["fair"]:
        return "fair"
    return "poor"


def sort_by_severity(issues: Sequence[Issue]) -> list[Issue]:
    """Most severe first; ties keep detector order."""
    return sorted(issues, key=lambda i: SEVERITY_RANK[i.severity], reverse=True)


class Analysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    profanity_score: int = Field(ge=0, le=100)
    respect_score: int = Field(ge=0, le=100)
    mental_health_score: int = Field(ge=0, le=100)
    issues: Tuple[Issue, ...] = ()
    suggestions: Tuple[Suggestion, ...] = ()
    is_blocked: bool = False

    @computed_field
    @property
    def band(self) -> str:
        return score_band(self.score)


# --- HTTP bodies ---

class AnalyzeRequest(BaseModel):
    content: str
    scheduled_time: str = Field("09:00", description="24-hour HH:MM")


class AnalyzeResponse(Analysis):
    blocked: bool


class RewriteRequest(BaseModel):
    content: str
    suggestions: Optional[list[Suggestion]] = None
    scheduled_time: str = "09:00"


class ApplyRequest(BaseModel):
    content: str
    suggestion: Suggestion


class RewriteResponse(BaseModel):
    content: str
