from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from concept_booster.core.config import settings
from concept_booster.schemas.tutor import LanguageMode, RequestParams

AUDIENCE = "Indian school students (classes 5-10)"


class Feature(str, Enum):
    DOUBT = "doubt"
    LESSON = "lesson"
    QUIZ = "quiz"


@dataclass(frozen=True)
class Prompt:
    system: str
    user: str

    def messages(self) -> list[dict]:
        return [
            {"role": "system", "content": self.system},
            {"role": "user", "content": self.user},
        ]


_VERBS = {
    Feature.DOUBT: ("Answer entirely", "Answer"),
    Feature.LESSON: ("Respond entirely", "Respond"),
    Feature.QUIZ: ("Generate everything", "Generate"),
}


def language_instruction(feature: Feature, mode: LanguageMode) -> str:
    script_verb, verb = _VERBS[feature]
    match mode:
        case LanguageMode.HINDI:
            return f"{script_verb} in Hindi (Devanagari script). Use simple language suitable for school students."
        case LanguageMode.HINGLISH:
            return (
                f"{verb} in Hinglish (Hindi written in Roman script mixed with English). "
                "Keep it casual and student-friendly."
            )
        case LanguageMode.ENGLISH:
            return f"{verb} in simple English suitable for school students."
        case _:
            return language_instruction(feature, LanguageMode.ENGLISH)


DOUBT_SHAPE = """Your response MUST be valid JSON with this exact structure:
{
  "explanation": "A clear 2-3 sentence explanation of the concept",
  "steps": ["Step 1", "Step 2", "Step 3", "Step 4"],
  "example": "A fun real-life example with an emoji",
  "tip": "A helpful tip starting with 💡"
}

Rules:
- Keep explanations very simple, use real-life analogies
- Steps should be clear and numbered (provide 3-5 steps)
- Examples should use emojis and be relatable to Indian students
- Tips should be memorable and practical
- ONLY return valid JSON, no markdown, no extra text"""

LESSON_SHAPE = """Your response MUST be valid JSON with this exact structure:
{
  "definition": "A clear 3-4 sentence definition/explanation of the topic with real-life context",
  "steps": ["Step 1 to learn this", "Step 2", "Step 3", "Step 4"],
  "mistakes": ["Common mistake 1", "Common mistake 2", "Common mistake 3"],
  "practice": [
    {"q": "A thought-provoking question about the topic", "a": "A clear, concise answer"},
    {"q": "Another question", "a": "Another answer"},
    {"q": "Third question", "a": "Third answer"}
  ]
}

Rules:
- Definition should use real-life Indian examples (cricket, chai, bazaar, etc.)
- Steps should be actionable learning steps
- Mistakes should be specific to this topic, not generic
- Practice questions should test understanding, not memorization
- Use emojis sparingly for friendliness
- ONLY return valid JSON, no markdown, no extra text"""

QUIZ_SHAPE = """Your response MUST be valid JSON array with this structure:
[
  {
    "q": "The question text",
    "options": ["Option A", "Option B", "Option C", "Option D"],
    "correct": 0,
    "explanation": "Brief explanation of the correct answer with emoji"
  }
]

Rules:
- "options" always has exactly 4 entries
- "correct" is the 0-based index of the correct option
- Questions should range from easy to medium difficulty
- Explanations should be fun and memorable with emojis
- Mix conceptual and numerical questions if applicable
- ONLY return valid JSON array, no markdown, no extra text"""


def build_doubt_prompt(params: RequestParams) -> Prompt:
    system = (
        f"You are a friendly, encouraging AI tutor for {AUDIENCE}. "
        f"{language_instruction(Feature.DOUBT, params.language_mode)}\n\n{DOUBT_SHAPE}"
    )
    question = params.topic_or_question.strip()
    if params.image_description and params.image_description.strip():
        user = (
            f'The student uploaded an image described as: "{params.image_description.strip()}". '
            f"Their question: {question or 'Please explain this.'}"
        )
    else:
        user = question
    return Prompt(system=system, user=user)


def build_lesson_prompt(params: RequestParams) -> Prompt:
    topic = params.topic_or_question.strip()
    system = (
        f"You are an expert teacher for {AUDIENCE}. "
        f"{language_instruction(Feature.LESSON, params.language_mode)}\n\n"
        f'Teach the topic "{topic}" in a comprehensive yet easy-to-understand way.\n\n{LESSON_SHAPE}'
    )
    return Prompt(system=system, user=f"Teach me about: {topic}")


def build_quiz_prompt(params: RequestParams) -> Prompt:
    topic = params.topic_or_question.strip()
    count = params.count or settings.default_quiz_count
    system = (
        f"You are a quiz generator for {AUDIENCE}. "
        f"{language_instruction(Feature.QUIZ, params.language_mode)}\n\n"
        f'Generate exactly {count} multiple choice questions about "{topic}".\n\n{QUIZ_SHAPE}'
    )
    return Prompt(system=system, user=f"Generate {count} MCQ questions about: {topic}")
