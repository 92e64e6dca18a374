"""Heuristic language detection for user queries."""

from __future__ import annotations

import re
from enum import Enum


class Language(str, Enum):
    ENGLISH = "English"
    CHINESE = "Chinese"
    JAPANESE = "Japanese"
    KOREAN = "Korean"
    ARABIC = "Arabic"
    RUSSIAN = "Russian"
    THAI = "Thai"
    SPANISH = "Spanish"
    FRENCH = "French"
    GERMAN = "German"
    ITALIAN = "Italian"
    PORTUGUESE = "Portuguese"


# Evaluated in order; the first script present in the text wins.
_SCRIPT_PATTERNS: tuple[tuple[Language, re.Pattern[str]], ...] = (
    (Language.CHINESE, re.compile(r"[一-鿿]")),
    (Language.JAPANESE, re.compile(r"[぀-ゟ゠-ヿ]")),
    (Language.KOREAN, re.compile(r"[가-힯]")),
    (Language.ARABIC, re.compile(r"[؀-ۿ]")),
    (Language.RUSSIAN, re.compile(r"[Ѐ-ӿ]")),
    (Language.THAI, re.compile(r"[฀-๿]")),
)

# Plain substring matches against the lowercased text, not word matches.
_KEYWORDS: tuple[tuple[Language, tuple[str, ...]], ...] = (
    (Language.SPANISH, ("hola", "gracias", "por favor", "buenos días", "cómo", "está")),
    (Language.FRENCH, ("bonjour", "merci", "s'il vous plaît", "comment", "allez-vous")),
    (Language.GERMAN, ("hallo", "danke", "bitte", "wie", "geht es")),
    (Language.ITALIAN, ("ciao", "grazie", "per favore", "come", "stai")),
    (Language.PORTUGUESE, ("olá", "obrigado", "por favor", "como", "está")),
)


class LanguageDetector:
    """Classifies text by Unicode script first, then by keyword hints.

    Script ranges are unambiguous, so they always outrank keyword hits: a
    query mixing Han characters with ``"hola"`` is Chinese. Anything that
    matches neither falls back to English.
    """

    def detect(self, text: str) -> Language:
        for language, pattern in _SCRIPT_PATTERNS:
            if pattern.search(text):
                return language

        lowered = text.lower()
        for language, keywords in _KEYWORDS:
            if any(keyword in lowered for keyword in keywords):
                return language

        return Language.ENGLISH
