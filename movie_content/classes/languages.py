"""
ISO 639-1 language table for TMDB original_language codes.

TMDB reports a film's original language as a two-letter code; the content
page shows the English display name instead. The lookup map is built once at
import time.
"""

from enum import Enum


class Language(Enum):
    language_id: int
    value: str
    code: str

    def __new__(cls, language_id: int, code: str, value: str) -> "Language":
        """Create a Language member with a stable numeric ID, ISO code and display name.

        Args:
            language_id: Stable integer identifier.
            code: ISO 639-1 code as reported by TMDB (e.g. "en").
            value: Human-readable display name (e.g. "English").
        """
        obj = object.__new__(cls)
        obj._value_ = value
        obj.language_id = language_id
        obj.code = code
        return obj

    AFRIKAANS   = (1,  "af", "Afrikaans")
    ARABIC      = (2,  "ar", "Arabic")
    BENGALI     = (3,  "bn", "Bengali")
    BULGARIAN   = (4,  "bg", "Bulgarian")
    CANTONESE   = (5,  "cn", "Cantonese")
    CATALAN     = (6,  "ca", "Catalan")
    CROATIAN    = (7,  "hr", "Croatian")
    CZECH       = (8,  "cs", "Czech")
    DANISH      = (9,  "da", "Danish")
    DUTCH       = (10, "nl", "Dutch")
    ENGLISH     = (11, "en", "English")
    ESTONIAN    = (12, "et", "Estonian")
    TAGALOG     = (13, "tl", "Tagalog")
    FINNISH     = (14, "fi", "Finnish")
    FRENCH      = (15, "fr", "French")
    GEORGIAN    = (16, "ka", "Georgian")
    GERMAN      = (17, "de", "German")
    GREEK       = (18, "el", "Greek")
    GUJARATI    = (19, "gu", "Gujarati")
    HEBREW      = (20, "he", "Hebrew")
    HINDI       = (21, "hi", "Hindi")
    HUNGARIAN   = (22, "hu", "Hungarian")
    ICELANDIC   = (23, "is", "Icelandic")
    INDONESIAN  = (24, "id", "Indonesian")
    IRISH       = (25, "ga", "Irish")
    ITALIAN     = (26, "it", "Italian")
    JAPANESE    = (27, "ja", "Japanese")
    KANNADA     = (28, "kn", "Kannada")
    KAZAKH      = (29, "kk", "Kazakh")
    KOREAN      = (30, "ko", "Korean")
    LATIN       = (31, "la", "Latin")
    LATVIAN     = (32, "lv", "Latvian")
    LITHUANIAN  = (33, "lt", "Lithuanian")
    MALAY       = (34, "ms", "Malay")
    MALAYALAM   = (35, "ml", "Malayalam")
    MANDARIN    = (36, "zh", "Mandarin")
    MARATHI     = (37, "mr", "Marathi")
    MONGOLIAN   = (38, "mn", "Mongolian")
    NEPALI      = (39, "ne", "Nepali")
    NORWEGIAN   = (40, "no", "Norwegian")
    PERSIAN     = (41, "fa", "Persian")
    POLISH      = (42, "pl", "Polish")
    PORTUGUESE  = (43, "pt", "Portuguese")
    PUNJABI     = (44, "pa", "Punjabi")
    ROMANIAN    = (45, "ro", "Romanian")
    RUSSIAN     = (46, "ru", "Russian")
    SERBIAN     = (47, "sr", "Serbian")
    SLOVAK      = (48, "sk", "Slovak")
    SLOVENIAN   = (49, "sl", "Slovenian")
    SPANISH     = (50, "es", "Spanish")
    SWAHILI     = (51, "sw", "Swahili")
    SWEDISH     = (52, "sv", "Swedish")
    TAMIL       = (53, "ta", "Tamil")
    TELUGU      = (54, "te", "Telugu")
    THAI        = (55, "th", "Thai")
    TURKISH     = (56, "tr", "Turkish")
    UKRAINIAN   = (57, "uk", "Ukrainian")
    URDU        = (58, "ur", "Urdu")
    VIETNAMESE  = (59, "vi", "Vietnamese")
    WELSH       = (60, "cy", "Welsh")
    XHOSA       = (61, "xh", "Xhosa")
    ZULU        = (62, "zu", "Zulu")
    NO_LANGUAGE = (63, "xx", "No Language")

    @classmethod
    def from_code(cls, code: str) -> "Language | None":
        """Resolve an ISO 639-1 code (case/whitespace tolerant) to its member, or None."""
        if not code:
            return None
        return LANGUAGE_BY_CODE.get(code.strip().lower())


LANGUAGE_BY_CODE: dict[str, Language] = {language.code: language for language in Language}
