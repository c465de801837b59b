from __future__ import annotations

import math
from typing import Dict, Sequence

from app.core.config import (
    ABUSE_PENALTY,
    BOUNDARY_PENALTIES,
    MARKER_BONUS,
    MENTAL_HEALTH_PENALTIES,
    PROFANITY_PENALTIES,
    RESPECT_PENALTIES,
    TONE_PENALTIES,
    URGENCY_PENALTIES,
)
from app.models.analysis import Issue
from app.services import lexicon as L


def _penalty(table: Dict[str, int], severity: str) -> int:
    return table.get(severity, table["other"])


def clamp(score: int) -> int:
    return max(0, min(100, score))


def profanity_score(issues: Sequence[Issue]) -> int:
    score = 100
    for issue in issues:
        if issue.category == "profanity":
            score -= _penalty(PROFANITY_PENALTIES, issue.severity)
        if issue.category in ("harassment", "discrimination"):
            score -= ABUSE_PENALTY
    return clamp(score)


def mental_health_score(content: str, issues: Sequence[Issue]) -> int:
    score = 100
    for issue in issues:
        if issue.category == "mental-health":
            score -= _penalty(MENTAL_HEALTH_PENALTIES, issue.severity)
        elif issue.category == "urgency":
            score -= _penalty(URGENCY_PENALTIES, issue.severity)
        elif issue.category == "boundary":
            score -= _penalty(BOUNDARY_PENALTIES, issue.severity)
    score += MARKER_BONUS * len(L.matches(content, L.POSITIVE_MARKERS))
    return clamp(score)


def respect_score(content: str, issues: Sequence[Issue]) -> int:
    score = 100
    for issue in issues:
        if issue.category == "respect":
            score -= _penalty(RESPECT_PENALTIES, issue.severity)
        elif issue.category == "tone":
            score -= _penalty(TONE_PENALTIES, issue.severity)
    score += MARKER_BONUS * len(L.matches(content, L.RESPECTFUL_MARKERS))
    return clamp(score)


def overall_score(profanity: int, respect: int, mental_health: int, blocked: bool) -> int:
    if blocked:
        return 0
    # half-up, not banker's rounding
    return int(math.floor((profanity + respect + mental_health) / 3 + 0.5))
