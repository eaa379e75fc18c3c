"""Logging configuration helpers."""

import logging
import re

_API_KEY_PARAM = re.compile(r"([?&]key=)[^&\s]+")


class RedactApiKeyFilter(logging.Filter):
    """Masks the ``key`` query parameter in rendered log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _API_KEY_PARAM.sub(r"\1***", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def configure_logging(debug: bool = False) -> None:
    """Configure package logging with a single redacting stream handler.

    httpx logs every request URL at INFO, and request URLs carry the API key,
    so its logger is capped at WARNING.
    """
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logger = logging.getLogger("nutriscore_estimator")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.addFilter(RedactApiKeyFilter())
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
