"""Language name to culture code table for the recognizer models."""

SUPPORTED_CULTURES = {
    "English": "en-us",
    "EnglishOthers": "en-za",
    "Spanish": "es-es",
    "SpanishMexican": "es-mx",
    "French": "fr-fr",
    "Portuguese": "pt-br",
    "German": "de-de",
    "Italian": "it-it",
    "Dutch": "nl-nl",
    "Chinese": "zh-cn",
    "Japanese": "ja-jp",
    "Korean": "ko-kr",
    "Hindi": "hi-in",
    "Turkish": "tr-tr",
    "Swedish": "sv-se",
    "Arabic": "ar-ae",
}


def get_culture_code(language):
    """Return the culture code for a language, or None when it is not supported."""
    return SUPPORTED_CULTURES.get(language)
