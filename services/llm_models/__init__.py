"""
LLM Pydantic Models

Value objects for the translation dispatcher:
- Request/result models (TranslationRequest, TranslationResult)
- Output mode enum (OutputMode)
- Provider call outcome (ProviderOutcome, OutcomeKind)
"""

from .translation_models import (
    OutcomeKind,
    OutputMode,
    ProviderOutcome,
    TranslationRequest,
    TranslationResult
)

__all__ = [
    'OutcomeKind',
    'OutputMode',
    'ProviderOutcome',
    'TranslationRequest',
    'TranslationResult'
]
