"""Language utility functions for mapping between language codes, names and flags"""
from types import MappingProxyType
from typing import List, NamedTuple

AUTO_DETECT = "auto"
DEFAULT_FLAG = "🌐"


class Language(NamedTuple):
    """A supported language: ISO 639-1 code, English name, native name and flag emoji"""
    code: str
    name: str
    native_name: str
    flag: str


# (code, name, native_name, flag)
# "auto" stays first so pickers show it at the top
_LANGUAGES_DATA = (
    (AUTO_DETECT, 'Auto Detect', 'Auto', DEFAULT_FLAG),
    ('en', 'English', 'English', '🇬🇧'),
    ('uz', 'Uzbek', "O'zbek", '🇺🇿'),
    ('ru', 'Russian', 'Русский', '🇷🇺'),
    ('es', 'Spanish', 'Español', '🇪🇸'),
    ('fr', 'French', 'Français', '🇫🇷'),
    ('de', 'German', 'Deutsch', '🇩🇪'),
    ('it', 'Italian', 'Italiano', '🇮🇹'),
    ('pt', 'Portuguese', 'Português', '🇵🇹'),
    ('zh', 'Chinese', '中文', '🇨🇳'),
    ('ja', 'Japanese', '日本語', '🇯🇵'),
    ('ko', 'Korean', '한국어', '🇰🇷'),
    ('ar', 'Arabic', 'العربية', '🇸🇦'),
    ('hi', 'Hindi', 'हिन्दी', '🇮🇳'),
    ('tr', 'Turkish', 'Türkçe', '🇹🇷'),
    ('pl', 'Polish', 'Polski', '🇵🇱'),
    ('nl', 'Dutch', 'Nederlands', '🇳🇱'),
    ('sv', 'Swedish', 'Svenska', '🇸🇪'),
    ('da', 'Danish', 'Dansk', '🇩🇰'),
    ('no', 'Norwegian', 'Norsk', '🇳🇴'),
    ('fi', 'Finnish', 'Suomi', '🇫🇮'),
    ('cs', 'Czech', 'Čeština', '🇨🇿'),
    ('el', 'Greek', 'Ελληνικά', '🇬🇷'),
    ('he', 'Hebrew', 'עברית', '🇮🇱'),
    ('th', 'Thai', 'ไทย', '🇹🇭'),
    ('vi', 'Vietnamese', 'Tiếng Việt', '🇻🇳'),
    ('id', 'Indonesian', 'Bahasa Indonesia', '🇮🇩'),
    ('ms', 'Malay', 'Bahasa Melayu', '🇲🇾'),
    ('uk', 'Ukrainian', 'Українська', '🇺🇦'),
    ('ro', 'Romanian', 'Română', '🇷🇴'),
    ('hu', 'Hungarian', 'Magyar', '🇭🇺'),
    ('bg', 'Bulgarian', 'Български', '🇧🇬'),
    ('hr', 'Croatian', 'Hrvatski', '🇭🇷'),
    ('sk', 'Slovak', 'Slovenčina', '🇸🇰'),
    ('sl', 'Slovenian', 'Slovenščina', '🇸🇮'),
    ('sr', 'Serbian', 'Српски', '🇷🇸'),
    ('fa', 'Persian', 'فارسی', '🇮🇷'),
    ('bn', 'Bengali', 'বাংলা', '🇧🇩'),
    ('ta', 'Tamil', 'தமிழ்', '🇮🇳'),
    ('te', 'Telugu', 'తెలుగు', DEFAULT_FLAG),
    ('ml', 'Malayalam', 'മലയാളം', DEFAULT_FLAG),
    ('kn', 'Kannada', 'ಕನ್ನಡ', DEFAULT_FLAG),
    ('mr', 'Marathi', 'मराठी', DEFAULT_FLAG),
    ('gu', 'Gujarati', 'ગુજરાતી', DEFAULT_FLAG),
    ('pa', 'Punjabi', 'ਪੰਜਾਬੀ', DEFAULT_FLAG),
    ('sw', 'Swahili', 'Kiswahili', '🇰🇪'),
    ('af', 'Afrikaans', 'Afrikaans', '🇿🇦'),
    ('tg', 'Tajik', 'Тоҷикӣ', '🇹🇯'),
    ('kk', 'Kazakh', 'Қазақша', '🇰🇿'),
    ('az', 'Azerbaijani', 'Azərbaycan', '🇦🇿'),
    ('ky', 'Kyrgyz', 'Кыргызча', '🇰🇬'),
    ('tk', 'Turkmen', 'Türkmençe', '🇹🇲'),
)

LANGUAGES = MappingProxyType({
    code: Language(code, name, native_name, flag)
    for code, name, native_name, flag in _LANGUAGES_DATA
})

# Symbols the model may pick from on the "Detected Language" line
DETECTION_FLAGS = "🇬🇧🇺🇿🇷🇺🇩🇪🇫🇷🇪🇸🇮🇹🇵🇹🇨🇳🇯🇵🇰🇷🇸🇦🇹🇷🇮🇳🇵🇱🇳🇱🇸🇪🇨🇿🇺🇦🇮🇷🇮🇱🇹🇭🇻🇳🇮🇩🇰🇿🇦🇿🇹🇯🇰🇬🇹🇲"


def get_language_name(language_code: str) -> str:
    """
    Convert an ISO 639-1 code to its English name.

    Args:
        language_code: ISO 639-1 code (e.g., "en", "de")

    Returns:
        Full language name (e.g., "English", "German"), or the code itself if unknown
    """
    language = LANGUAGES.get(language_code)
    return language.name if language else language_code


def get_flag(language_code: str) -> str:
    """Return the flag emoji for a language code, falling back to a globe."""
    language = LANGUAGES.get(language_code)
    return language.flag if language else DEFAULT_FLAG


def get_all_languages() -> List[Language]:
    """Return all supported languages in display order."""
    return list(LANGUAGES.values())


def search_languages(query: str) -> List[Language]:
    """
    Find languages whose English name, native name or code contains the query.

    Matching is case-insensitive.
    """
    lower_query = query.lower()
    return [
        lang for lang in LANGUAGES.values()
        if lower_query in lang.name.lower()
        or lower_query in lang.native_name.lower()
        or lower_query in lang.code.lower()
    ]
