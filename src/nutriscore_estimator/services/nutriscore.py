"""Nutri-Score estimation pipeline."""

import logging
from dataclasses import dataclass, field

from nutriscore_estimator.adapters.gemini_client import NutritionTextClient
from nutriscore_estimator.domain.nutrition import GradeResult
from nutriscore_estimator.services.extraction import (
    NUTRIENT_RULES,
    ExtractionRule,
    extract_nutrients,
)
from nutriscore_estimator.services.prompts import build_prompt
from nutriscore_estimator.services.scoring import ScoreCalculator, grade_for_score

_logger = logging.getLogger(__name__)


@dataclass
class NutriScorePipeline:
    """Estimates a product's grade from generated nutrition text.

    Errors raised by the text client propagate unchanged; deciding what to do
    with a failed estimate is left to the caller.
    """

    client: NutritionTextClient
    calculator: ScoreCalculator = field(default_factory=ScoreCalculator)
    rules: tuple[ExtractionRule, ...] = NUTRIENT_RULES
    debug: bool = False

    async def estimate(self, product_name: str) -> GradeResult:
        """Build the prompt, query the client, and grade the answer."""
        prompt = build_prompt(product_name)
        answer = await self.client.generate(prompt)
        if self.debug:
            _logger.info("Nutrition answer for %s: %s", product_name, answer)

        extracted = extract_nutrients(answer, self.rules)
        profile = extracted.to_profile()
        score = self.calculator.score(profile)
        result = GradeResult(
            profile=profile,
            grade=grade_for_score(score.final_score),
            score=score,
            missing_fields=extracted.missing_fields(),
        )
        if self.debug:
            _logger.info(
                "Nutrition estimate for %s: profile=%s grade=%s missing=%s",
                product_name,
                profile,
                result.grade,
                result.missing_fields,
            )
        return result
