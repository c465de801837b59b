from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from app.core.config import (
    EARLY_MORNING_HOUR,
    POLITENESS_MIN_LENGTH,
    SUPPORTIVE_MIN_LENGTH,
    URGENCY_THRESHOLD,
)
from app.models.analysis import Issue, Suggestion
from app.services import lexicon as L

log = logging.getLogger("detectors")

_HOUR_PREFIX = re.compile(r"\s*([+-]?\d+)")

APPRECIATION_NOTE = "\n\nThank you for your time and effort on this."
NO_RESPONSE_NOTE = "\n\n(No need to respond until you start your workday)"


@dataclass
class DetectorResult:
    issues: List[Issue] = field(default_factory=list)
    suggestions: List[Suggestion] = field(default_factory=list)
    is_blocked: bool = False


def _rewrite(original: str, suggested: str, reason: str, category: str) -> Suggestion:
    return Suggestion(kind="rewrite", original=original, suggested=suggested, reason=reason, category=category)


def detect_profanity(content: str) -> DetectorResult:
    """
    Profanity and other inappropriate content.

    Severe, discriminatory and harassment matches are flagged critical and
    block the message; they get no suggestion because the message has to be
    rewritten by its author. Moderate and mild matches get a professional
    alternative where the table has one. Every tier is always scanned.
    """
    out = DetectorResult()

    for word in L.matches(content, L.SEVERE):
        out.issues.append(Issue(
            category="profanity", severity="critical", flagged=True,
            description=f'Severe profanity detected: "{word}". Message blocked for workplace appropriateness.',
            span=L.find_span(content, word),
        ))
        out.is_blocked = True

    for term in L.matches(content, L.DISCRIMINATORY):
        out.issues.append(Issue(
            category="discrimination", severity="critical", flagged=True,
            description=f'Discriminatory language detected: "{term}". Message blocked to maintain respectful workplace.',
            span=L.find_span(content, term),
        ))
        out.is_blocked = True

    for phrase in L.matches(content, L.HARASSMENT):
        out.issues.append(Issue(
            category="harassment", severity="critical", flagged=True,
            description=f'Harassment language detected: "{phrase}". Message blocked to prevent workplace hostility.',
            span=L.find_span(content, phrase),
        ))
        out.is_blocked = True

    for word in L.matches(content, L.MODERATE):
        out.issues.append(Issue(
            category="profanity", severity="high",
            description=f'Inappropriate language detected: "{word}". Consider professional alternatives.',
            span=L.find_span(content, word),
        ))
        alt = L.alternative(L.PROFESSIONAL, word)
        if alt:
            out.suggestions.append(_rewrite(
                word, alt, "Maintains professional workplace communication standards", "profanity"))

    for word in L.matches(content, L.MILD):
        out.issues.append(Issue(
            category="profanity", severity="medium",
            description=f'Unprofessional language detected: "{word}". Consider more professional alternatives.',
            span=L.find_span(content, word),
        ))
        alt = L.alternative(L.PROFESSIONAL, word)
        if alt:
            out.suggestions.append(_rewrite(
                word, alt, "Enhances professional tone and workplace respect", "profanity"))

    return out


def detect_toxic_behavior(content: str) -> DetectorResult:
    out = DetectorResult()

    for phrase in L.matches(content, L.AGGRESSIVE):
        out.issues.append(Issue(
            category="tone", severity="high",
            description=f'Aggressive communication pattern detected: "{phrase}". This may create workplace tension.',
            span=L.find_span(content, phrase),
        ))
        alt = L.alternative(L.CONSTRUCTIVE, phrase)
        if alt:
            out.suggestions.append(_rewrite(
                phrase, alt, "Promotes constructive dialogue and reduces workplace conflict", "respect"))

    for phrase in L.matches(content, L.PASSIVE_AGGRESSIVE):
        out.issues.append(Issue(
            category="tone", severity="medium",
            description=f'Passive-aggressive tone detected: "{phrase}". Consider more direct, constructive communication.',
            span=L.find_span(content, phrase),
        ))

    for phrase in L.matches(content, L.DISMISSIVE):
        out.issues.append(Issue(
            category="tone", severity="low",
            description=f'Dismissive phrasing detected: "{phrase}". Acknowledge the request before declining it.',
            span=L.find_span(content, phrase),
        ))

    # flagged, but the block decision is left to is_blocked()
    for phrase in L.matches(content, L.THREATENING):
        out.issues.append(Issue(
            category="harassment", severity="critical", flagged=True,
            description=f'Threatening language detected: "{phrase}". This violates workplace conduct policies.',
            span=L.find_span(content, phrase),
        ))

    return out


def detect_tone_and_urgency(content: str) -> DetectorResult:
    out = DetectorResult()

    for phrase in L.matches(content, L.DEMANDING):
        out.issues.append(Issue(
            category="tone", severity="medium",
            description=f'Demanding language detected: "{phrase}". Consider more collaborative phrasing.',
            span=L.find_span(content, phrase),
        ))
        alt = L.alternative(L.RESPECTFUL_ALTERNATIVES, phrase)
        if alt:
            out.suggestions.append(_rewrite(
                phrase, alt, "Creates more respectful and collaborative workplace communication", "respect"))

    urgent = L.matches(content, L.URGENCY_WORDS)
    if len(urgent) > URGENCY_THRESHOLD:
        out.issues.append(Issue(
            category="urgency", severity="high",
            description="Excessive urgency language may cause unnecessary stress and anxiety.",
        ))
        out.suggestions.append(Suggestion(
            kind="tone-adjustment",
            original=content,
            suggested=L.replace_terms(content, L.URGENCY_WORDS, "when convenient"),
            reason="Reduces workplace stress and respects work-life balance",
            category="mental-health",
        ))

    return out


def detect_mental_health_impact(content: str) -> DetectorResult:
    out = DetectorResult()

    for word in L.matches(content, L.STRESS_WORDS):
        out.issues.append(Issue(
            category="mental-health", severity="high",
            description=f'Potentially harmful language detected: "{word}". This may negatively impact mental health.',
            span=L.find_span(content, word),
        ))
        alt = L.alternative(L.SUPPORTIVE, word)
        if alt:
            out.suggestions.append(_rewrite(
                word, alt, "Promotes positive mental health and constructive feedback", "mental-health"))

    if len(content) > SUPPORTIVE_MIN_LENGTH and not L.contains_any(content, L.SUPPORTIVE_PHRASES):
        out.suggestions.append(Suggestion(
            kind="addition",
            original=content,
            suggested=content + APPRECIATION_NOTE,
            reason="Adding appreciation improves workplace relationships and mental wellbeing",
            category="mental-health",
        ))

    return out


def detect_respect_and_inclusivity(content: str) -> DetectorResult:
    out = DetectorResult()

    if len(content) > POLITENESS_MIN_LENGTH and not L.contains_any(content, L.POLITENESS_MARKERS):
        out.issues.append(Issue(
            category="respect", severity="low",
            description="Message could benefit from more polite and respectful language.",
        ))
        out.suggestions.append(Suggestion(
            kind="addition",
            original=content,
            suggested="Please " + content[:1].lower() + content[1:],
            reason="Adding politeness markers enhances workplace respect",
            category="respect",
        ))

    for term in L.matches(content, L.EXCLUSIVE_TERMS):
        out.issues.append(Issue(
            category="respect", severity="medium",
            description=f'Consider more inclusive language instead of "{term}".',
            span=L.find_span(content, term),
        ))
        alt = L.alternative(L.INCLUSIVE, term)
        if alt:
            out.suggestions.append(_rewrite(
                term, alt, "Promotes inclusive and respectful workplace communication", "respect"))

    return out


def parse_hour(scheduled_time: str) -> Optional[int]:
    """Integer prefix of the part before ':'; None when there isn't one."""
    m = _HOUR_PREFIX.match((scheduled_time or "").split(":")[0])
    if m is None:
        log.debug("Unparseable scheduled time %r; skipping early-morning check", scheduled_time)
        return None
    return int(m.group(1))


def detect_timing_and_boundaries(content: str, scheduled_time: str) -> DetectorResult:
    out = DetectorResult()

    for phrase in L.matches(content, L.AFTER_HOURS):
        out.issues.append(Issue(
            category="boundary", severity="high",
            description=f'Message implies after-hours work: "{phrase}". This may violate work-life balance.',
            span=L.find_span(content, phrase),
        ))
        out.suggestions.append(_rewrite(
            phrase, "during business hours", "Respects work-life boundaries and employee wellbeing", "boundary"))

    hour = parse_hour(scheduled_time)
    if content and hour is not None and hour < EARLY_MORNING_HOUR:
        out.suggestions.append(Suggestion(
            kind="addition",
            original=content,
            suggested=content + NO_RESPONSE_NOTE,
            reason="Clarifies no immediate response expected, respecting personal time",
            category="mental-health",
        ))

    return out
