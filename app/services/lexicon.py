"""
Static word and phrase tables used by the detectors.

Everything here is built once at import time and never mutated. Lookups are
case-insensitive. A term made only of word characters matches on whole-word
boundaries ("classic" does not contain "ass"); anything else (multi-word
phrases, apostrophes, punctuation) matches as a plain substring.
"""
from __future__ import annotations

import re
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from app.models.analysis import Span

LEXICON_VERSION = "2024.1"

_WORD = re.compile(r"\w+")

# --- Profanity tiers ---

MILD = (
    "damn", "hell", "crap", "suck", "sucks", "stupid", "dumb", "idiot", "moron", "jerk",
)
MODERATE = (
    "piss", "ass", "bitch", "bastard", "wtf", "omg", "jesus christ", "god damn",
)
SEVERE = (
    "fuck", "fucking", "fucked", "motherfucker", "asshole", "dickhead", "cocksucker",
    "son of a bitch", "piece of shit", "bullshit", "shit",
)
DISCRIMINATORY = (
    "retard", "retarded",
)
HARASSMENT = (
    "shut up", "go to hell", "screw you", "piss off", "get lost", "drop dead",
)

# --- Toxic behaviour ---

AGGRESSIVE = (
    "you always", "you never", "typical", "obviously you", "clearly you don't",
    "how hard is it", "are you kidding me", "seriously?", "unbelievable",
)
PASSIVE_AGGRESSIVE = (
    "fine whatever", "if you say so", "sure thing", "noted", "interesting choice",
    "good luck with that", "hope that works out", "we'll see",
)
DISMISSIVE = (
    "whatever", "not my problem", "figure it out", "deal with it", "your call",
    "if you insist", "suit yourself",
)
THREATENING = (
    "or else", "you better", "don't make me", "last warning", "final notice",
    "consequences", "you'll regret", "watch yourself",
)

# --- Mental health ---

STRESS_WORDS = (
    "failure", "wrong", "bad", "terrible", "awful", "disaster", "catastrophe",
    "nightmare", "hopeless", "useless", "worthless", "pathetic", "incompetent",
)
SUPPORTIVE_PHRASES = (
    "thank you", "appreciate", "great work", "well done", "excellent",
    "support", "help", "valuable", "important", "meaningful",
)

# --- Respect ---

DEMANDING = (
    "you need to", "you must", "you should", "do this now", "fix this now", "get this done",
    "make sure you", "don't forget to", "remember to", "you have to",
)
POLITENESS_MARKERS = ("please", "thank you", "thanks", "appreciate")
EXCLUSIVE_TERMS = ("guys", "manpower", "chairman", "mankind", "manmade")

# --- Urgency / timing ---

URGENCY_WORDS = ("urgent", "asap", "immediately", "now", "emergency", "critical", "rush")
AFTER_HOURS = (
    "tonight", "this evening", "over the weekend", "before tomorrow",
    "after hours", "late night", "early morning",
)

# --- Positive markers; each one found earns a flat scoring bonus ---

POSITIVE_MARKERS = (
    "thank you", "appreciate", "great work", "support", "help", "when convenient",
    "excellent", "valuable", "important", "meaningful",
)
RESPECTFUL_MARKERS = (
    "please", "thank you", "could you", "would you mind", "if possible",
    "appreciate", "when convenient",
)

# --- Alternatives ---

PROFESSIONAL = MappingProxyType({
    "damn": "unfortunate",
    "hell": "difficult situation",
    "crap": "poor quality",
    "suck": "is challenging",
    "sucks": "is problematic",
    "stupid": "ineffective",
    "dumb": "unclear",
    "idiot": "person who made an error",
    "moron": "someone who needs guidance",
    "jerk": "difficult person",
    "piss": "frustrate",
    "ass": "person",
    "bitch": "complain",
    "bastard": "difficult person",
    "wtf": "what is happening",
    "omg": "surprisingly",
    "jesus christ": "goodness",
    "god damn": "very frustrating",
})

CONSTRUCTIVE = MappingProxyType({
    "you always": "I've noticed that sometimes",
    "you never": "it would be helpful if",
    "typical": "this situation",
    "obviously you": "it appears that",
    "clearly you don't": "perhaps we could clarify",
    "how hard is it": "could we find a way to",
    "are you kidding me": "I'm surprised by this",
    "seriously?": "I'd like to understand this better",
    "unbelievable": "unexpected",
})

SUPPORTIVE = MappingProxyType({
    "failure": "learning opportunity",
    "wrong": "needs adjustment",
    "bad": "could be improved",
    "terrible": "challenging",
    "awful": "difficult",
    "disaster": "setback",
    "catastrophe": "significant challenge",
    "nightmare": "complex situation",
    "hopeless": "challenging but manageable",
    "useless": "needs improvement",
    "worthless": "has potential for improvement",
    "pathetic": "needs development",
    "incompetent": "developing skills",
})

RESPECTFUL_ALTERNATIVES = MappingProxyType({
    "you need to": "could you please",
    "you must": "would you mind",
    "you should": "it would be helpful if you could",
    "do this now": "when you have a chance, could you",
    "fix this now": "could you please fix this when you have a chance",
    "get this done": "please complete this when convenient",
    "make sure you": "please ensure that you",
    "don't forget to": "please remember to",
    "remember to": "please don't forget to",
    "you have to": "it would be great if you could",
})

INCLUSIVE = MappingProxyType({
    "guys": "everyone/team",
    "manpower": "workforce/staff",
    "chairman": "chairperson",
    "mankind": "humanity",
    "manmade": "artificial/synthetic",
})


# --- Matching ---

def is_single_word(term: str) -> bool:
    return _WORD.fullmatch(term) is not None


@lru_cache(maxsize=None)
def pattern(term: str) -> re.Pattern:
    escaped = re.escape(term)
    if is_single_word(term):
        escaped = rf"\b{escaped}\b"
    return re.compile(escaped, re.IGNORECASE)


def find_span(text: str, term: str) -> Optional[Span]:
    """Location of the first match of `term` in `text`, or None."""
    m = pattern(term).search(text)
    if m is None:
        return None
    return Span(start=m.start(), end=m.end())


def contains(text: str, term: str) -> bool:
    return pattern(term).search(text) is not None


def matches(text: str, terms: Iterable[str]) -> list[str]:
    """Terms from `terms` present in `text`, in table order."""
    return [t for t in terms if contains(text, t)]


def contains_any(text: str, terms: Iterable[str]) -> bool:
    return any(contains(text, t) for t in terms)


def alternative(table: Mapping[str, str], term: str) -> Optional[str]:
    return table.get(term.lower())


def replace_terms(text: str, terms: Iterable[str], replacement: str) -> str:
    for t in terms:
        text = pattern(t).sub(lambda _m: replacement, text)
    return text
