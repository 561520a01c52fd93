"""
LLM Provider Factory
Provides a unified interface for the two upstream LLM families (Groq, Gemini).

Adapters make exactly one HTTP call per invocation and never retry. Every
failure is reported as a ProviderOutcome so the caller decides what happens
next; rate-limit responses are told apart from hard errors by status code.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, FrozenSet, List, Optional

import requests
from openai import APIConnectionError, APIResponseValidationError, APIStatusError, OpenAI

from services.llm_models.translation_models import ProviderOutcome

logger = logging.getLogger(__name__)

# Sampling parameters shared by both families
TEMPERATURE = 0.3
MAX_OUTPUT_TOKENS = 2000
DEFAULT_TIMEOUT = 30.0

# Ordered by preference: most accurate first, fastest last
GROQ_MODELS = (
    "openai/gpt-oss-120b",
    "llama-3.1-70b-versatile",
    "openai/gpt-oss-20b",
    "qwen-qwq-32b",
    "llama-3.1-8b-instant",
)

GEMINI_MODEL = "gemini-1.5-flash"

GROQ_BASE_URL = "https://api.groq.com/openai/v1"
GEMINI_URL = f"https://generativelanguage.googleapis.com/v1beta/models/{GEMINI_MODEL}:generateContent"


class LLMProvider(ABC):
    """Abstract base class for LLM providers"""

    # Status codes that mean "temporarily out of capacity" for this provider
    RATE_LIMIT_STATUSES: FrozenSet[int] = frozenset()

    def __init__(self, api_key: str, timeout: float = DEFAULT_TIMEOUT):
        if not api_key:
            raise ValueError(f"API key for {self.get_provider_name()} is required")
        self.api_key = api_key
        self.timeout = timeout

    @abstractmethod
    def complete(self, prompt: str, model: Optional[str] = None) -> ProviderOutcome:
        """
        Send a single-message prompt and return the classified outcome.

        Args:
            prompt: The full instruction text, sent as one user message
            model: Model identifier, for providers that serve several models

        Returns:
            ProviderOutcome tagged ok / rate_limited / provider_error / transport_error
        """
        pass

    @abstractmethod
    def get_available_models(self) -> List[str]:
        """Return list of available models for this provider"""
        pass

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return provider name ('groq', 'gemini')"""
        pass

    def classify_failure(self, model: str, status_code: int, body: str) -> ProviderOutcome:
        """Turn a non-2xx response into a rate-limit or hard-error outcome."""
        if status_code in self.RATE_LIMIT_STATUSES:
            return ProviderOutcome.rate_limited(model, status_code, body)
        return ProviderOutcome.provider_error(model, status_code, body)


class GroqProvider(LLMProvider):
    """Groq API provider, spoken to through its OpenAI-compatible endpoint"""

    RATE_LIMIT_STATUSES = frozenset({429, 503, 529})

    def __init__(self, api_key: str, timeout: float = DEFAULT_TIMEOUT):
        super().__init__(api_key, timeout)
        # Retries belong to the dispatcher, not the SDK
        self.client = OpenAI(
            api_key=self.api_key,
            base_url=GROQ_BASE_URL,
            max_retries=0,
            timeout=self.timeout,
        )
        logger.debug("Initialized Groq provider")

    def complete(self, prompt: str, model: Optional[str] = None) -> ProviderOutcome:
        model = model or GROQ_MODELS[0]

        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
                temperature=TEMPERATURE,
                max_tokens=MAX_OUTPUT_TOKENS,
            )
        except APIStatusError as e:
            return self.classify_failure(model, e.status_code, e.response.text)
        except APIResponseValidationError as e:
            return ProviderOutcome.provider_error(model, e.status_code, f"Unexpected response body: {e}")
        except APIConnectionError as e:
            logger.error(f"Groq {model} connection failed: {e}")
            return ProviderOutcome.transport_error(model, str(e))

        content = ""
        if response.choices:
            content = response.choices[0].message.content or ""
        return ProviderOutcome.ok(model, content)

    def get_available_models(self) -> List[str]:
        return list(GROQ_MODELS)

    def get_provider_name(self) -> str:
        return "groq"


class GeminiProvider(LLMProvider):
    """Google Gemini provider, called over the REST generateContent endpoint"""

    RATE_LIMIT_STATUSES = frozenset({429, 503})

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": TEMPERATURE,
                "maxOutputTokens": MAX_OUTPUT_TOKENS,
            },
        }

    def complete(self, prompt: str, model: Optional[str] = None) -> ProviderOutcome:
        model = GEMINI_MODEL

        try:
            response = requests.post(
                GEMINI_URL,
                params={"key": self.api_key},
                json=self.build_payload(prompt),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Gemini connection failed: {e}")
            return ProviderOutcome.transport_error(model, str(e))

        if not response.ok:
            return self.classify_failure(model, response.status_code, response.text)

        try:
            text = self.extract_text(response.json())
        except ValueError as e:
            return ProviderOutcome.provider_error(model, response.status_code, f"Unexpected response body: {e}")

        return ProviderOutcome.ok(model, text)

    @staticmethod
    def extract_text(data: Any) -> str:
        """
        Pull candidates[0].content.parts[0].text, or "" if any level is missing.

        Raises:
            ValueError: body is not JSON or a level has the wrong type
        """
        def first(items):
            if not items:
                return {}
            if not isinstance(items, list):
                raise ValueError(f"expected a list, got {type(items).__name__}")
            return items[0] or {}

        def field(obj, key):
            if not isinstance(obj, dict):
                raise ValueError(f"expected an object, got {type(obj).__name__}")
            return obj.get(key)

        content = field(first(field(data, "candidates")), "content") or {}
        text = field(first(field(content, "parts")), "text") or ""
        if not isinstance(text, str):
            raise ValueError(f"text is {type(text).__name__}, not a string")
        return text

    def get_available_models(self) -> List[str]:
        return [GEMINI_MODEL]

    def get_provider_name(self) -> str:
        return "gemini"


class LLMProviderFactory:
    """Factory class for creating LLM provider instances"""

    PROVIDERS = {
        "groq": GroqProvider,
        "gemini": GeminiProvider,
    }

    @staticmethod
    def create_provider(
        provider_name: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT
    ) -> LLMProvider:
        """
        Create an LLM provider instance.

        Args:
            provider_name: Provider to use ("groq", "gemini")
            api_key: Credential for that provider, passed per call and never cached
            timeout: Per-request timeout in seconds

        Returns:
            LLMProvider instance

        Raises:
            ValueError: If provider is not supported or API key is missing
        """
        provider_class = LLMProviderFactory.PROVIDERS.get(provider_name.lower())
        if provider_class is None:
            raise ValueError(
                f"Unsupported LLM provider: {provider_name}. "
                f"Supported providers: {', '.join(LLMProviderFactory.PROVIDERS)}"
            )
        return provider_class(api_key, timeout=timeout)
