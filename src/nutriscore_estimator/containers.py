"""Dependency container wiring for the estimator."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutriscore_estimator.adapters.gemini_client import (
    HttpxGeminiClient,
    NutritionTextClient,
)
from nutriscore_estimator.app_logging import configure_logging
from nutriscore_estimator.config import Settings
from nutriscore_estimator.services.nutriscore import NutriScorePipeline
from nutriscore_estimator.services.products import ProductGradingService
from nutriscore_estimator.services.scoring import ScoreCalculator


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    text_client: NutritionTextClient
    pipeline: NutriScorePipeline
    grading_service: ProductGradingService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(debug=resolved_settings.debug)
    gemini_client = HttpxGeminiClient.create(
        api_key=resolved_settings.gemini_api_key,
        base_url=resolved_settings.gemini_base_url,
        model=resolved_settings.gemini_model,
        timeout_seconds=resolved_settings.gemini_timeout_seconds,
    )
    pipeline = NutriScorePipeline(
        client=gemini_client,
        calculator=ScoreCalculator(),
        debug=resolved_settings.debug,
    )
    grading_service = ProductGradingService(pipeline)

    async def close_resources() -> None:
        await gemini_client.close()

    return AppContainer(
        settings=resolved_settings,
        text_client=gemini_client,
        pipeline=pipeline,
        grading_service=grading_service,
        close_resources=close_resources,
    )
