"""Errors raised while requesting generated nutrition text."""


class NutritionTextError(Exception):
    """Base class for failures of the text generation call."""


class EmptyResponseError(NutritionTextError):
    """The response envelope carried no candidates."""


class MalformedEnvelopeError(NutritionTextError):
    """The response body was not JSON or lacked the answer text."""


class GenerationTransportError(NutritionTextError):
    """The request failed at the network level (timeout, DNS, refused)."""


class _HttpStatusError(NutritionTextError):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code


class GenerationClientError(_HttpStatusError):
    """The endpoint answered with a 4xx status."""


class GenerationServerError(_HttpStatusError):
    """The endpoint answered with a 5xx status."""
