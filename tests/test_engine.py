import pytest
from pydantic import ValidationError

from app.services import analyze as A
from app.services import detectors as D


def test_blocked_profanity_scenario(blocked_message):
    analysis = A.analyze_message(blocked_message, "09:00")
    critical = [i for i in analysis.issues if i.category == "profanity" and i.severity == "critical"]
    assert critical and critical[0].flagged and '"shit"' in critical[0].description
    assert analysis.is_blocked
    assert A.is_blocked(analysis)
    assert analysis.score == 0
    # sub-scores keep their own values
    assert analysis.profanity_score == 50
    assert analysis.respect_score == 90


def test_polite_message_scores_full_marks(clean_message):
    analysis = A.analyze_message(clean_message, "10:00")
    assert analysis.issues == ()
    assert analysis.suggestions == ()
    assert analysis.score == 100
    assert analysis.band == "good"
    assert not A.is_blocked(analysis)


def test_aggressive_and_demanding_scenario(aggressive_message):
    analysis = A.analyze_message(aggressive_message, "09:00")
    tone = [i.description for i in analysis.issues if i.category == "tone"]
    assert any(d.startswith("Aggressive") for d in tone)
    assert any(d.startswith("Demanding") for d in tone)
    assert not A.is_blocked(analysis)
    assert analysis.respect_score == 65
    assert analysis.score == 88


def test_early_morning_schedule_suggests_no_response_note():
    analysis = A.analyze_message("Hi", "06:30")
    notes = [s for s in analysis.suggestions if s.kind == "addition" and "No need to respond" in s.suggested]
    assert len(notes) == 1
    assert notes[0].category == "mental-health"


@pytest.mark.parametrize("word", ["fuck", "bullshit", "asshole", "motherfucker"])
@pytest.mark.parametrize("when", ["00:00", "09:00", "23:59"])
def test_severe_words_always_block(word, when):
    analysis = A.analyze_message(f"This is {word} nonsense", when)
    assert A.is_blocked(analysis)
    assert analysis.score == 0


def test_short_clean_message_has_no_findings():
    analysis = A.analyze_message("See you at the meeting.", "09:00")
    assert analysis.issues == ()
    assert analysis.suggestions == ()
    assert analysis.score == 100


def test_stacked_severe_matches_clamp_profanity_score():
    analysis = A.analyze_message("fuck fucking fucked motherfucker asshole dickhead bullshit shit", "09:00")
    assert analysis.profanity_score == 0
    assert 0 <= analysis.respect_score <= 100
    assert 0 <= analysis.mental_health_score <= 100


def test_threatening_language_is_caught_only_by_boundary_check():
    analysis = A.analyze_message("Finish the slides or else", "10:00")
    assert not analysis.is_blocked
    assert A.is_blocked(analysis)
    assert analysis.profanity_score == 50
    assert analysis.score == 83


def test_empty_content():
    analysis = A.analyze_message("", "06:30")
    assert analysis.issues == ()
    assert analysis.suggestions == ()
    assert (analysis.score, analysis.profanity_score, analysis.respect_score, analysis.mental_health_score) == (100, 100, 100, 100)
    assert not analysis.is_blocked


def test_analysis_is_deterministic_and_parallel_safe():
    content = "You always leave this terrible mess tonight, guys. Do this now, it's urgent, asap, rush!"
    first = A.analyze_message(content, "07:00", parallel=False)
    assert A.analyze_message(content, "07:00", parallel=False) == first
    assert A.analyze_message(content, "07:00", parallel=True) == first


def test_failing_detector_does_not_hide_the_others(monkeypatch):
    def boom(content):
        raise RuntimeError("broken lexicon")

    monkeypatch.setattr(D, "detect_mental_health_impact", boom)
    analysis = A.analyze_message("This is a disaster and you need to fix it", "10:00")
    assert not any(i.category == "mental-health" for i in analysis.issues)
    assert any(i.category == "tone" for i in analysis.issues)


def test_analysis_is_immutable(clean_message):
    analysis = A.analyze_message(clean_message, "10:00")
    with pytest.raises(ValidationError):
        analysis.score = 5


def test_rewrite_applies_analysis_suggestions():
    content = "that was damn stupid"
    analysis = A.analyze_message(content, "10:00")
    assert A.rewrite(content, analysis.suggestions) == "that was unfortunate ineffective"


def test_issues_sort_by_severity_keeping_detector_order_for_ties():
    from app.models.analysis import sort_by_severity

    analysis = A.analyze_message("omg that was damn stupid, you must do better", "10:00")
    ordered = sort_by_severity(analysis.issues)
    assert [i.severity for i in ordered] == ["high", "medium", "medium", "medium", "low"]
    assert ordered[1].description.startswith('Unprofessional language detected: "damn"')
