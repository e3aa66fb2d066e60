"""
Requirement and recommendation models.

``RequirementProfile`` is the per-request input to the selector: the PPFD
window a plant wants plus its size category.  Normal construction validates
the window (finite, non-negative, ``intensity_min <= intensity_max``).  The selector
itself never re-validates, so a profile built with ``model_construct()``
still yields a deterministic, if meaningless, ranking.

``Recommendation`` is the selector's public result.  It exposes only values
drawn directly from the winning fixture and sample.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from grow_light_advisor.taxonomy.size_taxonomy import SizeCategory


class RequirementProfile(BaseModel):
    """Target light window for one plant.

    Attributes:
        intensity_min: Lower bound of the acceptable PPFD range.
        intensity_max: Upper bound of the acceptable PPFD range.
        size_category: Physical scale of the plant.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    intensity_min: float
    intensity_max: float
    size_category: SizeCategory

    @model_validator(mode="after")
    def validate_window(self) -> "RequirementProfile":
        if self.intensity_min < 0 or self.intensity_max < 0:
            raise ValueError("intensity_min and intensity_max must be non-negative.")
        if self.intensity_min > self.intensity_max:
            raise ValueError(
                f"intensity_min ({self.intensity_min}) must be <= "
                f"intensity_max ({self.intensity_max})."
            )
        return self

    @property
    def target_midpoint(self) -> float:
        return (self.intensity_min + self.intensity_max) / 2


class Recommendation(BaseModel):
    """The chosen fixture/distance pairing.

    Attributes:
        power_rating: Rated power of the chosen fixture (W).
        distance_cm: Mounting distance of the chosen sample (cm).
        intensity: Measured PPFD at that distance.
    """

    model_config = ConfigDict(frozen=True)

    power_rating: float
    distance_cm: float
    intensity: float
