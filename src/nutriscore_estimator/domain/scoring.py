"""Threshold bands used to convert measurements into points."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ThresholdBand:
    """Ascending cut points for one nutrient category."""

    cut_points: tuple[float, ...]

    def __post_init__(self) -> None:
        pairs = zip(self.cut_points, self.cut_points[1:], strict=False)
        if any(lower >= upper for lower, upper in pairs):
            raise ValueError("cut points must be strictly ascending")

    def points(self, value: float) -> int:
        """Return the index of the first cut point not exceeded by value."""
        for index, cut_point in enumerate(self.cut_points):
            if value <= cut_point:
                return index
        return len(self.cut_points)
