import os

MAX_BODY_BYTES = int(os.getenv("MAX_BODY_BYTES", 64 * 1024))  # messages, not documents
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PARALLEL_DETECTORS = os.getenv("PARALLEL_DETECTORS", "0").lower() in ("1", "true", "yes")

# Analyzer configuration
URGENCY_THRESHOLD = 2         # distinct urgency words tolerated
SUPPORTIVE_MIN_LENGTH = 50    # chars before we nudge for appreciation
POLITENESS_MIN_LENGTH = 30    # chars before we nudge for "please"
EARLY_MORNING_HOUR = 8        # scheduled before this hour -> "no need to respond"

SCORE_BANDS = {
    "good": 80,
    "fair": 60,
}

# Per-issue penalties, keyed by severity ("other" covers the remaining tiers)
PROFANITY_PENALTIES = {"critical": 50, "high": 30, "other": 15}
ABUSE_PENALTY = 50  # harassment / discrimination, any severity
MENTAL_HEALTH_PENALTIES = {"critical": 30, "high": 20, "other": 10}
URGENCY_PENALTIES = {"high": 15, "other": 10}
BOUNDARY_PENALTIES = {"high": 25, "other": 15}
RESPECT_PENALTIES = {"critical": 30, "high": 20, "other": 10}
TONE_PENALTIES = {"high": 15, "other": 10}
MARKER_BONUS = 5

SUGGESTION_PRIORITY = {
    "profanity": 5,
    "mental-health": 4,
    "boundary": 3,
    "professionalism": 3,
    "respect": 2,
    "clarity": 1,
}
