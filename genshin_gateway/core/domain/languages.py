# genshin_gateway/core/domain/languages.py
# =========================================================================
# LANGUAGE DIRECTORY: the closed set of data languages served upstream
#
# Converts between:
# 1. Canonical lowercase keys (used in request paths and bulk archive names)
# 2. Display forms (the casing of the per-language folders in genshin-db)
# 3. Short locale aliases (ISO-style codes and legacy game codes)
# =========================================================================

from enum import Enum
from typing import Dict, List, Optional


class Language(str, Enum):
    """Canonical language keys. Values are always lowercase."""
    CHINESE_SIMPLIFIED = "chinesesimplified"
    CHINESE_TRADITIONAL = "chinesetraditional"
    ENGLISH = "english"
    FRENCH = "french"
    GERMAN = "german"
    INDONESIAN = "indonesian"
    ITALIAN = "italian"
    JAPANESE = "japanese"
    KOREAN = "korean"
    PORTUGUESE = "portuguese"
    RUSSIAN = "russian"
    SPANISH = "spanish"
    THAI = "thai"
    TURKISH = "turkish"
    VIETNAMESE = "vietnamese"


DEFAULT_LANGUAGE = Language.ENGLISH

# --- 1. DISPLAY FORMS ---
# Folder names under src/data/ and src/data/index/ in the data repository.
DISPLAY_FORMS: Dict[Language, str] = {
    Language.CHINESE_SIMPLIFIED: "ChineseSimplified",
    Language.CHINESE_TRADITIONAL: "ChineseTraditional",
    Language.ENGLISH: "English",
    Language.FRENCH: "French",
    Language.GERMAN: "German",
    Language.INDONESIAN: "Indonesian",
    Language.ITALIAN: "Italian",
    Language.JAPANESE: "Japanese",
    Language.KOREAN: "Korean",
    Language.PORTUGUESE: "Portuguese",
    Language.RUSSIAN: "Russian",
    Language.SPANISH: "Spanish",
    Language.THAI: "Thai",
    Language.TURKISH: "Turkish",
    Language.VIETNAMESE: "Vietnamese",
}

# --- 2. LOCALE ALIASES ---
# Many-to-one: several codes may point at the same language.
LOCALE_ALIASES: Dict[str, Language] = {
    "chs": Language.CHINESE_SIMPLIFIED,
    "cht": Language.CHINESE_TRADITIONAL,
    "zh-cn": Language.CHINESE_SIMPLIFIED,
    "zh-tw": Language.CHINESE_TRADITIONAL,
    "de": Language.GERMAN,
    "en": Language.ENGLISH,
    "es": Language.SPANISH,
    "fr": Language.FRENCH,
    "id": Language.INDONESIAN,
    "it": Language.ITALIAN,
    "ja": Language.JAPANESE,
    "ko": Language.KOREAN,
    "pt": Language.PORTUGUESE,
    "ru": Language.RUSSIAN,
    "th": Language.THAI,
    "tr": Language.TURKISH,
    "vi": Language.VIETNAMESE,
    "jp": Language.JAPANESE,
    "kr": Language.KOREAN,
}

# --- 3. LOOKUP TABLE ---
_KEY_TO_LANGUAGE: Dict[str, Language] = {lang.value: lang for lang in Language}

# --- PUBLIC FUNCTIONS ---

def canonicalize(token: Optional[str]) -> Optional[Language]:
    """
    Normalizes a language name or locale alias to its canonical key.
    Example: 'Japanese', 'ja', 'JP' -> Language.JAPANESE

    Returns None when nothing matches; that is not an error by itself.
    """
    if not token:
        return None

    ident = token.lower()

    # 1. Direct key
    if ident in _KEY_TO_LANGUAGE:
        return _KEY_TO_LANGUAGE[ident]

    # 2. Locale alias
    return LOCALE_ALIASES.get(ident)

def display_form(language: Language) -> str:
    """Returns the upstream folder casing, e.g. 'chinesesimplified' -> 'ChineseSimplified'."""
    return DISPLAY_FORMS[Language(language)]

def is_supported(key: str) -> bool:
    """True if `key` is exactly one of the canonical lowercase keys."""
    return key in _KEY_TO_LANGUAGE

def supported_languages() -> List[str]:
    """Returns all canonical keys in directory order."""
    return [lang.value for lang in Language]
