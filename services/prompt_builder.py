"""
Prompt Builder
Decides the output mode for a piece of text and renders the instruction prompt
sent to the LLM. Both functions are pure: same input, same output.
"""

from typing import Optional

from services.language_utils import AUTO_DETECT, DETECTION_FLAGS, get_flag, get_language_name
from services.llm_models.translation_models import OutputMode

# Inputs with at most this many words get the dictionary-style breakdown
VOCABULARY_MAX_WORDS = 4


def detect_output_mode(text: str) -> OutputMode:
    """
    Detect if input is vocabulary (1-4 words) or a sentence (5+ words).

    Empty or whitespace-only text counts as zero words and is treated as vocabulary.
    """
    word_count = len(text.split())
    return OutputMode.VOCABULARY if word_count <= VOCABULARY_MAX_WORDS else OutputMode.SENTENCE


def _rules(rules, override: Optional[str]) -> str:
    lines = [override] if override else []
    lines.extend(rules)
    return "\n".join(lines)


def build_vocabulary_prompt(
    text: str,
    source_lang: str,
    target_lang: str,
    context: Optional[str] = None
) -> str:
    """Build the multi-sense dictionary prompt for a word or short phrase."""
    target_name = get_language_name(target_lang)
    target_flag = get_flag(target_lang)
    source_name = get_language_name(source_lang)

    override = None
    if source_lang != AUTO_DETECT:
        override = (
            f"- CRITICAL: The user has EXPLICITLY set the source language to {source_name}. "
            f"You MUST interpret the input as {source_name}, even if it looks like another language "
            f"(e.g. 'Gift' in German = Poison, not Present)."
        )

    rules = _rules([
        "- Use visual emojis that represent the meaning (🏦 for bank/money, 🌊 for river bank, 👋 for hello, 📚 for book, etc.)",
        "- Put pronunciation in [brackets] right after the word",
        f"- Write ALL explanations in {target_name}! Examples stay in the language of the searched word",
        '- If the input has typos like "helo" or "bitte", correct it and show the proper spelling',
        "- Include articles if important (der/die/das for German, etc.) and mention them in the note section",
        "- Keep it clean - NO asterisks **, NO markdown formatting",
        "- Be concise but informative",
    ], override)

    context_line = f"User context: {context}\n" if context else ""

    return f"""You are an expert linguist translator. Translate a word/phrase to {target_name}.

FORMAT YOUR RESPONSE EXACTLY LIKE THIS (no markdown, no ** symbols):

Detected Language: [Full Language Name] [flag emoji from this list: {DETECTION_FLAGS}]

[Corrected Word if typo, or Original Word] [pronunciation]

1. [visual emoji] [Translation in {target_name}] [part of speech like noun, verb, adj., etc.]
   [One line explanation in {target_name} about when/how to use this meaning]
   Example: [A short example sentence in the detected language using the original word]

2. [visual emoji] [Alternative Translation] [part of speech]
   [One line explanation in {target_name}]
   Example: [Example sentence in the detected language]

(continue numbering if more meanings exist)

📝 Note: [Any special tips, cultural notes, or grammar tips - write in {target_name}]

IMPORTANT RULES:
{rules}

{context_line}Word to translate: "{text}"
Target language: {target_name} {target_flag}"""


def build_sentence_prompt(
    text: str,
    source_lang: str,
    target_lang: str,
    context: Optional[str] = None
) -> str:
    """Build the single clean translation prompt for longer text."""
    target_name = get_language_name(target_lang)
    target_flag = get_flag(target_lang)
    source_name = get_language_name(source_lang)

    override = None
    if source_lang != AUTO_DETECT:
        override = (
            f"- CRITICAL: The user has EXPLICITLY set the source language to {source_name}. "
            f"Treat the input as {source_name}, even if it looks like another language."
        )

    rules = _rules([
        "- Provide ONLY the translation after the detected language line",
        f"- Use natural, native-sounding {target_name}",
        "- Preserve the original meaning, tone, and style",
        "- NO explanations, NO alternatives, NO notes",
        "- NO asterisks **, NO markdown formatting",
        "- Just the clean translation",
    ], override)

    context_line = f"Context: {context}\n" if context else ""

    return f"""You are an expert translator. Translate text to {target_name}.

FORMAT YOUR RESPONSE EXACTLY LIKE THIS (no markdown, no ** symbols):

Detected Language: [Language Name] [flag emoji from this list: {DETECTION_FLAGS}]

[Your accurate, natural translation in {target_name}]

RULES:
{rules}

{context_line}Text to translate: "{text}"
Target language: {target_name} {target_flag}"""


def build_prompt(
    mode: OutputMode,
    text: str,
    source_lang: str,
    target_lang: str,
    context: Optional[str] = None
) -> str:
    """
    Render the prompt for the given output mode.

    Args:
        mode: OutputMode.VOCABULARY or OutputMode.SENTENCE
        text: The text to translate, quoted verbatim in the prompt
        source_lang: Source language code or "auto"
        target_lang: Target language code
        context: Optional free-text hint injected as its own line

    Returns:
        The prompt string
    """
    if mode == OutputMode.VOCABULARY:
        return build_vocabulary_prompt(text, source_lang, target_lang, context)
    return build_sentence_prompt(text, source_lang, target_lang, context)
