"""Tests for the Gemini HTTP adapter."""

import asyncio
import json
import logging
from collections.abc import Callable

import httpx
import pytest

from nutriscore_estimator.adapters.gemini_client import HttpxGeminiClient
from nutriscore_estimator.domain.errors import (
    EmptyResponseError,
    GenerationClientError,
    GenerationServerError,
    GenerationTransportError,
    MalformedEnvelopeError,
    NutritionTextError,
)


def _client(
    handler: Callable[[httpx.Request], httpx.Response],
) -> HttpxGeminiClient:
    transport = httpx.MockTransport(handler)
    return HttpxGeminiClient(
        api_key="secret",
        base_url="https://generativelanguage.test/v1beta/models",
        model="gemini-test",
        http_client=httpx.AsyncClient(transport=transport),
        timeout_seconds=5,
    )


def _answer(text: str) -> dict[str, object]:
    return {
        "candidates": [
            {
                "content": {"parts": [{"text": text}], "role": "model"},
                "finishReason": "STOP",
            }
        ],
        "usageMetadata": {"totalTokenCount": 42},
    }


def test_generate_posts_prompt_and_unwraps_text() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_answer("Sódio: 400 mg"))

    client = _client(handler)

    text = asyncio.run(client.generate("Forneça informações"))

    assert text == "Sódio: 400 mg"
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/v1beta/models/gemini-test:generateContent"
    assert request.url.params["key"] == "secret"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content.decode()) == {
        "contents": [{"parts": [{"text": "Forneça informações"}]}]
    }


def test_server_error_status() -> None:
    client = _client(lambda request: httpx.Response(500, text="boom"))

    with pytest.raises(GenerationServerError) as exc_info:
        asyncio.run(client.generate("prompt"))

    assert exc_info.value.status_code == 500


@pytest.mark.parametrize("status_code", [400, 403, 429])
def test_client_error_status(status_code: int) -> None:
    client = _client(lambda request: httpx.Response(status_code, json={}))

    with pytest.raises(GenerationClientError) as exc_info:
        asyncio.run(client.generate("prompt"))

    assert exc_info.value.status_code == status_code


@pytest.mark.parametrize(
    "payload", [{"candidates": []}, {}, {"candidates": None}]
)
def test_empty_candidates(payload: dict[str, object]) -> None:
    client = _client(lambda request: httpx.Response(200, json=payload))

    with pytest.raises(EmptyResponseError):
        asyncio.run(client.generate("prompt"))


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json=["candidates"]),
        httpx.Response(200, json={"candidates": [{"content": {"parts": []}}]}),
        httpx.Response(200, json={"candidates": [{"finishReason": "SAFETY"}]}),
    ],
)
def test_malformed_envelope(response: httpx.Response) -> None:
    client = _client(lambda request: response)

    with pytest.raises(MalformedEnvelopeError):
        asyncio.run(client.generate("prompt"))


@pytest.mark.parametrize(
    "error_type", [httpx.ConnectError, httpx.ReadTimeout, httpx.ConnectTimeout]
)
def test_transport_failures(error_type: type[httpx.TransportError]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise error_type("network down", request=request)

    client = _client(handler)

    with pytest.raises(GenerationTransportError):
        asyncio.run(client.generate("prompt"))


def test_errors_share_a_base_class() -> None:
    client = _client(lambda request: httpx.Response(503))

    with pytest.raises(NutritionTextError):
        asyncio.run(client.generate("prompt"))


def test_undecodable_body_is_malformed() -> None:
    client = _client(
        lambda request: httpx.Response(
            200, headers={"content-encoding": "gzip"}, content=b"not gzip at all"
        )
    )

    with pytest.raises(MalformedEnvelopeError):
        asyncio.run(client.generate("prompt"))


def test_non_object_body_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("nutriscore_estimator.adapters.gemini_client")
    logger.addHandler(caplog.handler)
    client = _client(lambda request: httpx.Response(200, json=["candidates"]))

    try:
        with caplog.at_level(logging.WARNING):
            with pytest.raises(MalformedEnvelopeError):
                asyncio.run(client.generate("prompt"))
    finally:
        logger.removeHandler(caplog.handler)

    assert any(
        record.levelno == logging.WARNING and "not a JSON object" in record.message
        for record in caplog.records
    )
