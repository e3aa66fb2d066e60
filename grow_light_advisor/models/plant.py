"""
Plant light analysis payload.

``PlantLightAnalysis`` mirrors the JSON document produced by the upstream
plant-identification step (species, size estimate, light needs and spectrum
notes).  Keys arrive in camelCase (``commonName``, ``numericValues.ppfdMin``);
snake_case names are accepted too.

Only ``plant_size`` and ``numeric_values.ppfd_min`` / ``ppfd_max`` feed the
selector, via ``to_requirement_profile()``.  The remaining fields are kept so
reports can echo what the analysis said.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from grow_light_advisor.models.requirement import RequirementProfile
from grow_light_advisor.taxonomy.size_taxonomy import SizeCategory

logger = logging.getLogger(__name__)

_PAYLOAD_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class NumericLightValues(BaseModel):
    """Numeric light figures used for charting and selection.

    Attributes:
        lpc: Light compensation point (PPFD).
        ppfd_min: Lower bound of the recommended PPFD range.
        ppfd_max: Upper bound of the recommended PPFD range.
        saturation: Estimated light saturation point (PPFD).
    """

    model_config = _PAYLOAD_CONFIG

    lpc: float = 0.0
    ppfd_min: float
    ppfd_max: float
    saturation: float = 0.0


class SpectrumNeeds(BaseModel):
    """Relative importance of blue and red light, 0–100 each."""

    model_config = _PAYLOAD_CONFIG

    blue_percent: float = 0.0
    red_percent: float = 0.0
    description: str = ""

    @field_validator("blue_percent", "red_percent")
    @classmethod
    def validate_percent(cls, v: float) -> float:
        if not 0.0 <= v <= 100.0:
            raise ValueError(f"Spectrum percentages must be in [0, 100], got {v}.")
        return v


class PlantLightAnalysis(BaseModel):
    """Light requirement analysis for one plant."""

    model_config = _PAYLOAD_CONFIG

    common_name: str
    scientific_name: str = ""
    plant_size: SizeCategory
    lpc: str = ""
    ppfd: str = ""
    light_summary: str = ""
    confidence_level: str = ""
    numeric_values: NumericLightValues
    spectrum: SpectrumNeeds = SpectrumNeeds()

    @field_validator("plant_size", mode="before")
    @classmethod
    def parse_plant_size(cls, v: Any) -> Any:
        if isinstance(v, str):
            return SizeCategory.parse(v)
        return v

    def to_requirement_profile(self) -> RequirementProfile:
        """Build the selector input from this analysis.

        Raises:
            pydantic.ValidationError: If the PPFD range is negative or inverted.
        """
        return RequirementProfile(
            intensity_min=self.numeric_values.ppfd_min,
            intensity_max=self.numeric_values.ppfd_max,
            size_category=self.plant_size,
        )


def load_plant_analysis(path: Path) -> PlantLightAnalysis:
    """Read one ``PlantLightAnalysis`` from a JSON file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the document is not a JSON object.
        pydantic.ValidationError: If the payload fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Plant analysis file not found: {path}")

    with path.open(encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Plant analysis file must contain a JSON object: {path}")

    analysis = PlantLightAnalysis.model_validate(raw)
    logger.debug(
        "Loaded analysis for %s (%s, PPFD %g-%g)",
        analysis.common_name,
        analysis.plant_size.value,
        analysis.numeric_values.ppfd_min,
        analysis.numeric_values.ppfd_max,
    )
    return analysis
