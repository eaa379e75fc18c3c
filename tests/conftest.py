"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from nutriscore_estimator.adapters.gemini_client import NutritionTextClient
from nutriscore_estimator.config import Settings
from nutriscore_estimator.domain.errors import NutritionTextError

SAMPLE_ANSWER = """Informações nutricionais médias por 100g de lasanha à bolonhesa:

Valor energético: 250-300 kcal
Açúcares totais: 4,5 g
Gorduras saturadas: 3,2 g
Sódio: 480 mg
Proteínas: 12 g
Fibras alimentares: 2,1 g
% de frutas, legumes e oleaginosas: 15%

Os valores podem variar conforme o preparo."""


@dataclass
class FakeNutritionTextClient(NutritionTextClient):
    """Fake text client returning a fixed answer and recording prompts."""

    answer: str = SAMPLE_ANSWER
    prompts: list[str] = field(default_factory=list)

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.answer


@dataclass
class FailingNutritionTextClient(NutritionTextClient):
    """Fake text client that always raises the given error."""

    error: NutritionTextError

    async def generate(self, prompt: str) -> str:
        raise self.error


@pytest.fixture
def settings() -> Settings:
    return Settings(
        gemini_api_key="gemini-key",
        gemini_base_url="https://generativelanguage.test/v1beta/models",
    )


@pytest.fixture
def text_client() -> FakeNutritionTextClient:
    return FakeNutritionTextClient()
