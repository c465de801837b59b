from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence

from app.core.config import PARALLEL_DETECTORS
from app.models.analysis import BLOCKING_CATEGORIES, Analysis, Suggestion, sort_by_severity
from app.services import detectors as D
from app.services import scoring as S
from app.services import rewrite as _rewrite

log = logging.getLogger("analyze")

# (name, fn(content, scheduled_time)); order is the order of issues/suggestions
DETECTORS: List[tuple[str, Callable[[str, str], D.DetectorResult]]] = [
    ("profanity", lambda c, t: D.detect_profanity(c)),
    ("toxic_behavior", lambda c, t: D.detect_toxic_behavior(c)),
    ("tone_urgency", lambda c, t: D.detect_tone_and_urgency(c)),
    ("mental_health", lambda c, t: D.detect_mental_health_impact(c)),
    ("respect", lambda c, t: D.detect_respect_and_inclusivity(c)),
    ("timing", D.detect_timing_and_boundaries),
]


def _run(name: str, fn, content: str, scheduled_time: str) -> D.DetectorResult:
    try:
        return fn(content, scheduled_time)
    except Exception:
        # one broken detector must not hide the others' findings
        log.exception("Detector %s failed; reporting no findings for it", name)
        return D.DetectorResult()


def _run_all(content: str, scheduled_time: str, parallel: bool) -> List[D.DetectorResult]:
    if not parallel:
        return [_run(name, fn, content, scheduled_time) for name, fn in DETECTORS]
    with ThreadPoolExecutor(max_workers=len(DETECTORS)) as pool:
        # map() yields in submission order
        return list(pool.map(lambda d: _run(d[0], d[1], content, scheduled_time), DETECTORS))


def analyze_message(content: str, scheduled_time: str, parallel: Optional[bool] = None) -> Analysis:
    """
    Score a message for workplace appropriateness.

    All detectors run on every call. Only the profanity detector decides
    `Analysis.is_blocked`; use `is_blocked()` at the call boundary for the
    broader check that also catches threatening language.
    """
    content = content or ""
    if parallel is None:
        parallel = PARALLEL_DETECTORS

    results = _run_all(content, scheduled_time, parallel)
    issues = [i for r in results for i in r.issues]
    suggestions = [s for r in results for s in r.suggestions]
    blocked = any(r.is_blocked for r in results)

    profanity = S.profanity_score(issues)
    respect = S.respect_score(content, issues)
    mental_health = S.mental_health_score(content, issues)
    score = S.overall_score(profanity, respect, mental_health, blocked)

    if issues:
        worst = sort_by_severity(issues)[0]
        log.info("Analysis: issues=%d suggestions=%d score=%d blocked=%s worst=%s/%s",
                 len(issues), len(suggestions), score, blocked, worst.category, worst.severity)
    else:
        log.info("Analysis: no issues, suggestions=%d score=%d", len(suggestions), score)

    return Analysis(
        score=score,
        profanity_score=profanity,
        respect_score=respect,
        mental_health_score=mental_health,
        issues=tuple(issues),
        suggestions=tuple(suggestions),
        is_blocked=blocked,
    )


def is_blocked(analysis: Analysis) -> bool:
    return analysis.is_blocked or any(
        issue.flagged or (issue.category in BLOCKING_CATEGORIES and issue.severity == "critical")
        for issue in analysis.issues
    )


def rewrite(content: str, suggestions: Sequence[Suggestion]) -> str:
    return _rewrite.rewrite(content, suggestions)
