"""Nutrition domain models."""

from dataclasses import dataclass, field, fields


@dataclass(frozen=True)
class NutrientProfile:
    """Nutrient quantities per 100 g of a food item."""

    energy_kcal: float = 0.0
    sugars_g: float = 0.0
    saturated_fat_g: float = 0.0
    sodium_mg: float = 0.0
    protein_g: float = 0.0
    fiber_g: float = 0.0
    fruit_veg_nut_pct: float = 0.0

    def __post_init__(self) -> None:
        for item in fields(self):
            if getattr(self, item.name) < 0:
                raise ValueError(f"{item.name} must not be negative")


@dataclass(frozen=True)
class ExtractedNutrients:
    """Values found in a text answer; None marks a field that was not found."""

    energy_kcal: float | None = None
    sugars_g: float | None = None
    saturated_fat_g: float | None = None
    sodium_mg: float | None = None
    protein_g: float | None = None
    fiber_g: float | None = None
    fruit_veg_nut_pct: float | None = None

    def missing_fields(self) -> tuple[str, ...]:
        """Return the names of fields that were not found."""
        return tuple(
            item.name for item in fields(self) if getattr(self, item.name) is None
        )

    def to_profile(self) -> NutrientProfile:
        """Convert to a profile, defaulting missing fields to 0.0."""
        values = {
            item.name: getattr(self, item.name) or 0.0 for item in fields(self)
        }
        return NutrientProfile(**values)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Point totals behind a grade."""

    negative_points: int
    positive_points: int

    @property
    def final_score(self) -> int:
        return self.negative_points - self.positive_points


@dataclass(frozen=True)
class GradeResult:
    """Nutrient profile paired with its letter grade."""

    profile: NutrientProfile
    grade: str
    score: ScoreBreakdown
    missing_fields: tuple[str, ...] = field(default_factory=tuple)
