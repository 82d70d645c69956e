from concept_booster.schemas.tutor import LanguageMode
from concept_booster.services.fallbacks import doubt_fallback, lesson_fallback


def test_doubt_fallback_echoes_raw_text():
    result = doubt_fallback("Sorry, I cannot help")
    assert result.explanation == "Sorry, I cannot help"
    assert result.steps == ["Read the explanation above carefully"]
    assert result.tip.startswith("💡")


def test_lesson_fallback_echoes_raw_text():
    raw = "Photosynthesis is... **bold** {"
    result = lesson_fallback(raw)
    assert result.definition == raw
    assert len(result.steps) == 1
    assert len(result.practice) == 1
    assert result.practice[0].question == "What did you learn?"


def test_fallback_boilerplate_follows_language():
    hindi = doubt_fallback("x", LanguageMode.HINDI)
    hinglish = lesson_fallback("x", LanguageMode.HINGLISH)
    assert hindi.explanation == "x"
    assert "explanation" in hindi.steps[0]
    assert hinglish.mistakes == ["Practice karna mat chhodo"]
