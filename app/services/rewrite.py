# app/services/rewrite.py
from __future__ import annotations

import logging
import re
from functools import reduce
from typing import List, Sequence

from app.core.config import SUGGESTION_PRIORITY
from app.models.analysis import Suggestion

log = logging.getLogger("rewrite")

# replace the whole running text with `suggested`
WHOLE_CONTENT_KINDS = {"addition", "tone-adjustment", "complete-rewrite"}


def prioritize(suggestions: Sequence[Suggestion]) -> List[Suggestion]:
    """Highest category weight first; equal weights keep their input order."""
    return sorted(suggestions, key=lambda s: SUGGESTION_PRIORITY.get(s.category, 0), reverse=True)


def apply_suggestion(content: str, suggestion: Suggestion) -> str:
    """
    Apply one suggestion to `content` and return the new text.

    rewrite/removal swap every case-insensitive occurrence of `original`
    (taken literally); the whole-content kinds return `suggested` as is.
    """
    if suggestion.kind in WHOLE_CONTENT_KINDS:
        return suggestion.suggested
    if not suggestion.original:
        return content
    rx = re.compile(re.escape(suggestion.original), re.IGNORECASE)
    return rx.sub(lambda _m: suggestion.suggested, content)


def rewrite(content: str, suggestions: Sequence[Suggestion]) -> str:
    """
    Fold the prioritised suggestions over `content`.

    Targeted rewrites see the result of earlier ones; a later whole-content
    suggestion discards everything applied before it.
    """
    ordered = prioritize(suggestions)
    log.info("Applying %d suggestions", len(ordered))
    return reduce(apply_suggestion, ordered, content)
