"""
Fixture measurement models.

``DistanceSample`` is one row of a fixture's photometric test sheet: the
PPFD (and lux) measured at a fixed distance below the fixture.

``Fixture`` groups the samples of one physical light.  Sample order is the
order of the test sheet and is preserved everywhere downstream, because the
selector uses catalog order as its final tie-break.

Both models are frozen — the measurement table is ground truth and is never
edited after the catalog is built.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class DistanceSample(BaseModel):
    """Light output measured at one distance from the fixture.

    Attributes:
        distance_cm: Tested distance from fixture to target surface (cm).
        intensity: Measured PPFD (µmol/m²/s) at that distance.
        illuminance: Measured illuminance (lux).  Carried for display only;
            never used in ranking.
    """

    model_config = ConfigDict(frozen=True)

    distance_cm: float
    intensity: float
    illuminance: float = 0.0

    @field_validator("distance_cm")
    @classmethod
    def validate_distance_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"distance_cm must be positive, got {v}.")
        return v

    @field_validator("intensity", "illuminance")
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"Measured values must be non-negative, got {v}.")
        return v


class Fixture(BaseModel):
    """A grow light with its rated power and distance test table.

    Attributes:
        power_rating: Rated electrical power in watts.  Used as an ordinal
            proxy for output and coverage.
        samples: Test-sheet rows in sheet order.  Non-empty; distances are
            unique within one fixture.
    """

    model_config = ConfigDict(frozen=True)

    power_rating: float
    samples: tuple[DistanceSample, ...]

    @field_validator("power_rating")
    @classmethod
    def validate_power_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"power_rating must be positive, got {v}.")
        return v

    @field_validator("samples")
    @classmethod
    def validate_samples(
        cls, v: tuple[DistanceSample, ...]
    ) -> tuple[DistanceSample, ...]:
        if not v:
            raise ValueError("A fixture must have at least one distance sample.")
        seen: set[float] = set()
        for sample in v:
            if sample.distance_cm in seen:
                raise ValueError(
                    f"Duplicate distance {sample.distance_cm:g} cm in fixture samples."
                )
            seen.add(sample.distance_cm)
        return v

    @property
    def label(self) -> str:
        """Display label, e.g. ``"24W"``."""
        return f"{self.power_rating:g}W"
