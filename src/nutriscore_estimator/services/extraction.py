"""Extraction of nutrient values from free-text model answers."""

import re
from dataclasses import dataclass, field

from nutriscore_estimator.domain.nutrition import ExtractedNutrients, NutrientProfile

# Dots grouping thousands ("1.200" or "1.200,5"), checked before plain decimals.
_GROUPED_NUMBER = r"\d{1,3}(?:\.\d{3})+(?:,\d+)?"
_NUMBER = rf"(?:{_GROUPED_NUMBER}|\d+(?:[.,]\d+)?)"
# A number, or a range of two numbers.
_NUMERAL = rf"({_NUMBER}(?:\s*[-–]\s*{_NUMBER})?)"
_RANGE_SEPARATOR = re.compile(r"\s*[-–]\s*")
_GROUPED = re.compile(_GROUPED_NUMBER)


@dataclass(frozen=True)
class ExtractionRule:
    """Regex rule pulling one nutrient value out of text.

    ``name`` is the NutrientProfile field the value belongs to.
    """

    name: str
    label: str
    unit: str
    pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        compiled = re.compile(
            rf"{re.escape(self.label)}.*?{_NUMERAL}\s*{re.escape(self.unit)}",
            re.IGNORECASE,
        )
        object.__setattr__(self, "pattern", compiled)

    def search(self, text: str) -> float | None:
        """Return the value found for this rule, or None if absent."""
        match = self.pattern.search(text)
        if match is None:
            return None
        return parse_numeral(match.group(1))


NUTRIENT_RULES: tuple[ExtractionRule, ...] = (
    ExtractionRule("energy_kcal", "Valor energético", "kcal"),
    ExtractionRule("sugars_g", "Açúcares totais", "g"),
    ExtractionRule("saturated_fat_g", "Gorduras saturadas", "g"),
    ExtractionRule("sodium_mg", "Sódio", "mg"),
    ExtractionRule("protein_g", "Proteínas", "g"),
    ExtractionRule("fiber_g", "Fibras alimentares", "g"),
    ExtractionRule("fruit_veg_nut_pct", "% de frutas, legumes e oleaginosas", "%"),
)


def parse_numeral(raw: str) -> float:
    """Parse a captured number or range; ranges resolve to their maximum."""
    values = [
        _parse_number(chunk) for chunk in _RANGE_SEPARATOR.split(raw.strip()) if chunk
    ]
    return max(values)


def _parse_number(chunk: str) -> float:
    if _GROUPED.fullmatch(chunk):
        chunk = chunk.replace(".", "")
    return float(chunk.replace(",", "."))


def extract_nutrients(
    text: str, rules: tuple[ExtractionRule, ...] = NUTRIENT_RULES
) -> ExtractedNutrients:
    """Extract every rule's value, keeping absent fields as None."""
    values = {rule.name: rule.search(text) for rule in rules}
    return ExtractedNutrients(**values)


def extract_profile(
    text: str, rules: tuple[ExtractionRule, ...] = NUTRIENT_RULES
) -> NutrientProfile:
    """Extract a nutrient profile, defaulting absent fields to 0.0."""
    return extract_nutrients(text, rules).to_profile()
