"""HTTP clients for the hosted LLM APIs (Gemini generateContent, Groq chat completions).

One request per call, no retries. Errors surface as LLMError subclasses so
routes can decide between a fallback and an error response.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from vitalai.core.config import get_settings
from vitalai.core.errors import LLMConfigurationError, LLMResponseError

logger = logging.getLogger(__name__)


class GeminiClient:
    """Minimal Gemini REST client: text in, text out."""

    def __init__(self, api_key: str, model: str, base_url: str, timeout: float = 60.0):
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @property
    def api_key(self) -> str:
        return self._api_key

    async def generate_content(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_output_tokens: int = 1024,
        **generation_config: Any,
    ) -> str:
        """Return the text of the first candidate.

        Raises:
            LLMConfigurationError: no API key configured
            LLMResponseError: transport failure, non-2xx status or unexpected envelope
        """
        if not self._api_key:
            raise LLMConfigurationError("Gemini API key is missing")
        url = f"{self._base_url}/models/{self._model}:generateContent"
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": temperature,
                "maxOutputTokens": max_output_tokens,
                **generation_config,
            },
        }
        logger.info("Gemini request: model=%s prompt_length=%d", self._model, len(prompt))
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(url, params={"key": self._api_key}, json=payload)
        except httpx.HTTPError as e:
            logger.error("Gemini request failed: %s", e)
            raise LLMResponseError(f"Gemini request failed: {e}") from e

        if response.status_code >= 400:
            logger.error("Gemini API error: %s, %s", response.status_code, response.text[:500])
            raise LLMResponseError(f"Gemini API error: {response.status_code}")

        try:
            data = response.json()
            return data["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error("Unexpected Gemini response format: %s", response.text[:500])
            raise LLMResponseError("Invalid response format from Gemini API") from e


class GroqClient:
    """OpenAI-compatible chat completions client for Groq."""

    def __init__(
        self,
        api_key: str,
        model: str,
        vision_model: str,
        base_url: str,
        timeout: float = 60.0,
    ):
        self._api_key = api_key
        self.model = model
        self.vision_model = vision_model
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @property
    def api_key(self) -> str:
        return self._api_key

    async def chat(
        self,
        messages: list[dict[str, Any]],
        model: str | None = None,
        max_tokens: int = 1500,
        temperature: float = 0.3,
    ) -> str:
        """Return the content of the first choice."""
        if not self._api_key:
            raise LLMConfigurationError("Groq API key is missing")
        model = model or self.model
        headers = {"Authorization": f"Bearer {self._api_key}", "Content-Type": "application/json"}
        payload = {
            "model": model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(f"{self._base_url}/chat/completions", json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error("Groq request failed: %s", e)
            raise LLMResponseError(f"Groq request failed: {e}") from e

        if response.status_code >= 400:
            try:
                message = response.json().get("error", {}).get("message")
            except ValueError:
                message = None
            logger.error("Groq API error: %s, %s", response.status_code, response.text[:500])
            raise LLMResponseError(message or f"Groq API error: {response.status_code}")

        try:
            return response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise LLMResponseError("Invalid response format from Groq API") from e


def get_gemini_client() -> GeminiClient:
    """FastAPI dependency; tests override it with a fake."""
    settings = get_settings()
    return GeminiClient(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        base_url=settings.gemini_base_url,
        timeout=settings.llm_timeout_seconds,
    )


def get_groq_client() -> GroqClient:
    settings = get_settings()
    return GroqClient(
        api_key=settings.groq_api_key,
        model=settings.groq_model,
        vision_model=settings.groq_vision_model,
        base_url=settings.groq_base_url,
        timeout=settings.llm_timeout_seconds,
    )
