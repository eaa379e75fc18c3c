"""Gemini generateContent API client."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx
from pydantic import ValidationError

from nutriscore_estimator.domain.errors import (
    EmptyResponseError,
    GenerationClientError,
    GenerationServerError,
    GenerationTransportError,
    MalformedEnvelopeError,
)
from nutriscore_estimator.domain.generation import GenerateContentResponse

_logger = logging.getLogger(__name__)


class NutritionTextClient(Protocol):
    """Interface for generative text calls."""

    async def generate(self, prompt: str) -> str:
        """Return the generated answer text for a prompt."""


@dataclass
class HttpxGeminiClient(NutritionTextClient):
    """HTTPX-backed Gemini client."""

    api_key: str
    base_url: str
    model: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 30.0

    @classmethod
    def create(
        cls, api_key: str, base_url: str, model: str, timeout_seconds: float = 30.0
    ) -> "HttpxGeminiClient":
        """Create a Gemini client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            model=model,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def generate(self, prompt: str) -> str:
        """Send a prompt to generateContent and return the answer text."""
        url = f"{self.base_url.rstrip('/')}/{self.model}:generateContent"
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        try:
            response = await self.http_client.post(
                url,
                params={"key": self.api_key},
                json=payload,
                timeout=self.timeout_seconds,
            )
        except httpx.TransportError as exc:
            _logger.warning("Gemini request failed: %s", type(exc).__name__)
            raise GenerationTransportError(str(exc) or type(exc).__name__) from exc
        except httpx.DecodingError as exc:
            _logger.warning("Gemini response body could not be decoded")
            raise MalformedEnvelopeError("response body could not be decoded") from exc

        if response.is_client_error:
            _logger.warning("Gemini client error: status=%s", response.status_code)
            raise GenerationClientError(response.status_code, response.reason_phrase)
        if response.is_server_error:
            _logger.warning("Gemini server error: status=%s", response.status_code)
            raise GenerationServerError(response.status_code, response.reason_phrase)

        return _answer_text(response)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _answer_text(response: httpx.Response) -> str:
    """Unwrap candidates[0].content.parts[0].text from the envelope."""
    try:
        raw = response.json()
    except ValueError as exc:
        _logger.warning("Gemini response is not JSON")
        raise MalformedEnvelopeError("response body is not JSON") from exc
    if not isinstance(raw, dict):
        _logger.warning("Gemini response is not a JSON object")
        raise MalformedEnvelopeError("response body is not a JSON object")
    try:
        envelope = GenerateContentResponse.model_validate(raw)
    except ValidationError as exc:
        _logger.warning("Gemini response envelope invalid: %s", exc.error_count())
        raise MalformedEnvelopeError("answer text missing from response") from exc
    if not envelope.candidates:
        _logger.warning("Gemini returned no candidates")
        raise EmptyResponseError("no candidates in response")
    return envelope.answer_text()
