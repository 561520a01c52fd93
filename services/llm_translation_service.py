"""
LLM Translation Service
Dispatches a translation request to the right provider and walks the Groq model
cascade when models are rate limited.
"""

import logging
from typing import Optional, Sequence

from services.llm_models.translation_models import (
    OutcomeKind,
    OutputMode,
    ProviderOutcome,
    TranslationRequest,
    TranslationResult
)
from services.llm_provider_factory import DEFAULT_TIMEOUT, GEMINI_MODEL, GROQ_MODELS, LLMProviderFactory
from services.prompt_builder import build_prompt, detect_output_mode

# Configure logging
logger = logging.getLogger(__name__)

MODEL_DISPLAY_NAMES = {
    "openai/gpt-oss-120b": "GPT-OSS 120B",
    "openai/gpt-oss-20b": "GPT-OSS 20B",
    "llama-3.1-70b-versatile": "Llama 3.1 70B",
    "qwen-qwq-32b": "Qwen QwQ 32B",
    "llama-3.1-8b-instant": "Llama 3.1 8B",
    GEMINI_MODEL: "Gemini Flash",
}


class TranslationError(Exception):
    """Terminal failure of a translate() call"""

    def __init__(self, message: str, outcome: Optional[ProviderOutcome] = None):
        super().__init__(message)
        self.outcome = outcome


class RateLimitExhaustedError(TranslationError):
    """Every model in the cascade was rate limited"""


class ProviderRequestError(TranslationError):
    """A provider answered with a non rate-limit error status"""


class ProviderTransportError(TranslationError):
    """No response was received from the provider"""


def _raise_terminal(outcome: ProviderOutcome):
    if outcome.kind == OutcomeKind.PROVIDER_ERROR:
        raise ProviderRequestError(outcome.message, outcome)
    raise ProviderTransportError(outcome.message, outcome)


def translate(
    request: TranslationRequest,
    groq_api_key: str,
    gemini_api_key: Optional[str] = None,
    models: Sequence[str] = GROQ_MODELS,
    timeout: float = DEFAULT_TIMEOUT
) -> TranslationResult:
    """
    Translate a request, choosing provider and model by output mode.

    Sentences go to Gemini first when a Gemini key is supplied; any Gemini
    failure falls back silently to Groq. Groq models are tried strictly in
    order, moving on only when a model is rate limited.

    Args:
        request: The translation request
        groq_api_key: Credential for the primary (Groq) provider
        gemini_api_key: Optional credential for the sentence-mode provider
        models: Ordered Groq model cascade
        timeout: Per-request timeout in seconds

    Returns:
        TranslationResult tagged with the model that answered

    Raises:
        RateLimitExhaustedError: every model in the cascade was rate limited
        ProviderRequestError: a provider rejected the request
        ProviderTransportError: a provider could not be reached
    """
    mode = detect_output_mode(request.text)
    prompt = build_prompt(mode, request.text, request.source_lang, request.target_lang, request.context)
    logger.info(f"Translating {len(request.text)} chars to {request.target_lang} in {mode.value} mode")

    if mode == OutputMode.SENTENCE and gemini_api_key:
        # Gemini is a preference for long text: any failure falls through to Groq
        try:
            gemini = LLMProviderFactory.create_provider("gemini", gemini_api_key, timeout=timeout)
            outcome = gemini.complete(prompt)
        except Exception as e:
            logger.warning(f"Gemini raised, falling back to Groq: {e}", exc_info=True)
        else:
            if outcome.is_ok:
                return TranslationResult(translation=outcome.text, model=outcome.model, mode=mode)
            logger.warning(f"Gemini failed, falling back to Groq: {outcome.message}")

    groq = LLMProviderFactory.create_provider("groq", groq_api_key, timeout=timeout)
    last_rate_limit = None

    for model in models:
        outcome = groq.complete(prompt, model=model)

        if outcome.kind == OutcomeKind.OK:
            return TranslationResult(translation=outcome.text, model=model, mode=mode)

        if outcome.kind == OutcomeKind.RATE_LIMITED:
            last_rate_limit = outcome
            logger.warning(f"Rate limit hit for {model}, trying next model...")
            continue

        logger.error(f"Translation aborted on {model}: {outcome.message}")
        _raise_terminal(outcome)

    if last_rate_limit is not None:
        raise RateLimitExhaustedError(last_rate_limit.message, last_rate_limit)
    raise RateLimitExhaustedError("All models hit rate limits")


def get_model_display_name(model: str) -> str:
    """Return a human-readable label for a model id, or the id itself if unknown."""
    return MODEL_DISPLAY_NAMES.get(model, model)
