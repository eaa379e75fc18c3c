"""Grade assignment for the product write path."""

import logging
from dataclasses import dataclass

from nutriscore_estimator.domain.errors import NutritionTextError
from nutriscore_estimator.services.nutriscore import NutriScorePipeline

HEALTHY_GRADES = frozenset({"A", "B"})
EMPTY_GRADE = ""

_logger = logging.getLogger(__name__)


@dataclass
class ProductGradingService:
    """Assigns grades to products without blocking the save on failures."""

    pipeline: NutriScorePipeline

    async def assign_grade(self, product_name: str) -> str:
        """Return the product grade, or an empty grade if estimation fails."""
        if not product_name or not product_name.strip():
            raise ValueError("Product name must not be blank")
        try:
            result = await self.pipeline.estimate(product_name)
        except NutritionTextError:
            _logger.exception("Failed to estimate grade for product: %s", product_name)
            return EMPTY_GRADE
        return result.grade


def is_healthy(grade: str) -> bool:
    """Whether a grade belongs to the healthy listing."""
    return grade in HEALTHY_GRADES
