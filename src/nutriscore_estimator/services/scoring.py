"""Nutri-Score style point banding and grade derivation."""

from dataclasses import dataclass, field

from nutriscore_estimator.domain.nutrition import NutrientProfile, ScoreBreakdown
from nutriscore_estimator.domain.scoring import ThresholdBand

ENERGY_BAND = ThresholdBand(
    (335, 670, 1005, 1340, 1675, 2010, 2345, 2680, 3015, 3350)
)
SUGARS_BAND = ThresholdBand((4.5, 9, 13.5, 18, 22.5))
SATURATED_FAT_BAND = ThresholdBand((1, 2, 3, 4, 5))
SODIUM_BAND = ThresholdBand((90, 180, 270, 360, 450))
PROTEIN_BAND = ThresholdBand((4.8, 6.4, 8))
FIBER_BAND = ThresholdBand((2.8, 3.7, 4.7))
FRUIT_VEG_NUT_BAND = ThresholdBand((10, 20, 40, 60, 80))

# Inclusive upper bounds, checked in order.
_GRADE_BOUNDS = ((-1, "A"), (0, "B"), (2, "C"), (4, "D"))
_WORST_GRADE = "E"


def grade_for_score(final_score: int) -> str:
    """Map a final score (negative minus positive points) to a letter."""
    for upper_bound, grade in _GRADE_BOUNDS:
        if final_score <= upper_bound:
            return grade
    return _WORST_GRADE


@dataclass(frozen=True)
class ScoreCalculator:
    """Computes points and grades from a nutrient profile."""

    energy: ThresholdBand = field(default=ENERGY_BAND)
    sugars: ThresholdBand = field(default=SUGARS_BAND)
    saturated_fat: ThresholdBand = field(default=SATURATED_FAT_BAND)
    sodium: ThresholdBand = field(default=SODIUM_BAND)
    protein: ThresholdBand = field(default=PROTEIN_BAND)
    fiber: ThresholdBand = field(default=FIBER_BAND)
    fruit_veg_nut: ThresholdBand = field(default=FRUIT_VEG_NUT_BAND)

    def score(self, profile: NutrientProfile) -> ScoreBreakdown:
        """Return negative and positive point totals for a profile."""
        negative = (
            self.energy.points(profile.energy_kcal)
            + self.sugars.points(profile.sugars_g)
            + self.saturated_fat.points(profile.saturated_fat_g)
            + self.sodium.points(profile.sodium_mg)
        )
        positive = (
            self.protein.points(profile.protein_g)
            + self.fiber.points(profile.fiber_g)
            + self.fruit_veg_nut.points(profile.fruit_veg_nut_pct)
        )
        return ScoreBreakdown(negative_points=negative, positive_points=positive)

    def grade(self, profile: NutrientProfile) -> str:
        """Return the letter grade for a profile."""
        return grade_for_score(self.score(profile).final_score)
