"""User-facing toast copy for gateway and quiz failures."""

from __future__ import annotations

from concept_booster.schemas.tutor import LanguageMode

TOASTS: dict[str, dict[LanguageMode, str]] = {
    "rate_limited": {
        LanguageMode.HINDI: "बहुत ज़्यादा सवाल! थोड़ी देर बाद फिर से पूछो।",
        LanguageMode.HINGLISH: "Rate limit exceeded. Thodi der baad phir se try karo.",
        LanguageMode.ENGLISH: "Rate limit exceeded. Please try again in a moment.",
    },
    "quota_exhausted": {
        LanguageMode.HINDI: "AI credits खत्म हो गए। बाद में कोशिश करो।",
        LanguageMode.HINGLISH: "AI credits khatam ho gaye. Baad mein try karo.",
        LanguageMode.ENGLISH: "AI credits exhausted. Please try later.",
    },
    "generic": {
        LanguageMode.HINDI: "कुछ गड़बड़ हो गई। फिर से कोशिश करो।",
        LanguageMode.HINGLISH: "Kuch gadbad ho gayi. Phir se try karo.",
        LanguageMode.ENGLISH: "Something went wrong. Please try again.",
    },
    "too_many_requests": {
        LanguageMode.HINDI: "बहुत जल्दी-जल्दी सवाल भेजे! थोड़ा रुको।",
        LanguageMode.HINGLISH: "Bahut zyada requests! Thoda ruk ke try karo.",
        LanguageMode.ENGLISH: "Too many requests from this device. Please slow down.",
    },
    "invalid_request": {
        LanguageMode.HINDI: "सवाल ठीक से नहीं भेजा गया। दोबारा देखो।",
        LanguageMode.HINGLISH: "Request theek nahi hai. Ek baar check karo.",
        LanguageMode.ENGLISH: "That request was not valid. Please check it and try again.",
    },
    "quiz_failed": {
        LanguageMode.HINDI: "सवाल नहीं बन पाए। फिर से कोशिश करो।",
        LanguageMode.HINGLISH: "Questions generate nahi ho paaye. Phir se try karo.",
        LanguageMode.ENGLISH: "Could not generate questions",
    },
}


def toast(key: str, language: LanguageMode) -> str:
    return TOASTS[key][language]
