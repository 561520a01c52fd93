"""
Translation Pydantic Models

Value objects passed between the translation route, the dispatcher and the
provider adapters. All of them are frozen: once built they are never mutated.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OutputMode(str, Enum):
    """How the translation is rendered: dictionary-style senses or one sentence."""
    VOCABULARY = "vocabulary"
    SENTENCE = "sentence"


class OutcomeKind(str, Enum):
    """Classification of a single provider call."""
    OK = "ok"
    RATE_LIMITED = "rate_limited"
    PROVIDER_ERROR = "provider_error"
    TRANSPORT_ERROR = "transport_error"


class TranslationRequest(BaseModel):
    """A translation request as supplied by the caller (text already trimmed)."""
    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Text to translate")
    source_lang: str = Field(default="auto", description="Source language code or 'auto'")
    target_lang: str = Field(description="Target language code, never 'auto'")
    context: Optional[str] = Field(default=None, description="Optional tone/domain hint")


class TranslationResult(BaseModel):
    """
    Result of a successful dispatch.

    `translation` is the raw model output, it is not checked against the
    prompt template. `model` is the internal id of the model that answered.
    """
    model_config = ConfigDict(frozen=True)

    translation: str = Field(description="Raw text returned by the model")
    model: str = Field(description="Identifier of the model that produced the text")
    mode: OutputMode = Field(description="Output mode used to build the prompt")


class ProviderOutcome(BaseModel):
    """
    Tagged result of one provider call.

    Exactly one of these is returned per adapter call; adapters never raise
    for HTTP or network failures.
    """
    model_config = ConfigDict(frozen=True)

    kind: OutcomeKind
    model: str
    text: str = ""
    status_code: Optional[int] = None
    message: str = ""

    @classmethod
    def ok(cls, model: str, text: str) -> "ProviderOutcome":
        return cls(kind=OutcomeKind.OK, model=model, text=text)

    @classmethod
    def rate_limited(cls, model: str, status_code: int, message: str) -> "ProviderOutcome":
        return cls(
            kind=OutcomeKind.RATE_LIMITED,
            model=model,
            status_code=status_code,
            message=f"Rate limit hit for {model}: {status_code} - {message}",
        )

    @classmethod
    def provider_error(cls, model: str, status_code: int, message: str) -> "ProviderOutcome":
        return cls(
            kind=OutcomeKind.PROVIDER_ERROR,
            model=model,
            status_code=status_code,
            message=f"{model} failed: {status_code} - {message}",
        )

    @classmethod
    def transport_error(cls, model: str, message: str) -> "ProviderOutcome":
        return cls(
            kind=OutcomeKind.TRANSPORT_ERROR,
            model=model,
            message=f"{model} request failed: {message}",
        )

    @property
    def is_ok(self) -> bool:
        return self.kind == OutcomeKind.OK
