"""Default payloads used when the gateway reply cannot be parsed.

The raw reply is echoed verbatim into the main text field so the student still
sees whatever the model said. Quizzes have no fallback.
"""

from __future__ import annotations

from concept_booster.schemas.tutor import LanguageMode, PracticeItem, TopicLesson, TutorResponse

DOUBT_BOILERPLATE = {
    LanguageMode.HINDI: {
        "step": "ऊपर दी गई explanation ध्यान से पढ़ो",
        "example": "🌟 इसे अपनी रोज़ की ज़िंदगी से जोड़कर देखो!",
        "tip": "💡 समझ न आए तो फिर से पूछो!",
    },
    LanguageMode.HINGLISH: {
        "step": "Upar wali explanation dhyan se padho",
        "example": "🌟 Isse apni daily life se relate karke dekho!",
        "tip": "💡 Clear na ho toh phir se poochho!",
    },
    LanguageMode.ENGLISH: {
        "step": "Read the explanation above carefully",
        "example": "🌟 Try to relate this to your daily life!",
        "tip": "💡 Ask again if you need more clarity!",
    },
}

LESSON_BOILERPLATE = {
    LanguageMode.HINDI: {
        "step": "ऊपर दी गई explanation पढ़ो",
        "mistake": "Practice करना मत छोड़ो",
        "question": "तुमने क्या सीखा?",
        "answer": "ऊपर की explanation फिर से देखो!",
    },
    LanguageMode.HINGLISH: {
        "step": "Upar wali explanation padho",
        "mistake": "Practice karna mat chhodo",
        "question": "Tumne kya seekha?",
        "answer": "Upar ki explanation phir se dekho!",
    },
    LanguageMode.ENGLISH: {
        "step": "Read the explanation above",
        "mistake": "Don't skip practicing",
        "question": "What did you learn?",
        "answer": "Review the explanation above!",
    },
}


def doubt_fallback(raw: str, language: LanguageMode = LanguageMode.ENGLISH) -> TutorResponse:
    copy = DOUBT_BOILERPLATE[language]
    return TutorResponse(explanation=raw, steps=[copy["step"]], example=copy["example"], tip=copy["tip"])


def lesson_fallback(raw: str, language: LanguageMode = LanguageMode.ENGLISH) -> TopicLesson:
    copy = LESSON_BOILERPLATE[language]
    return TopicLesson(
        definition=raw,
        steps=[copy["step"]],
        mistakes=[copy["mistake"]],
        practice=[PracticeItem(question=copy["question"], answer=copy["answer"])],
    )
