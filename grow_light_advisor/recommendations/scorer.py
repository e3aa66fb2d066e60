"""
Candidate scoring: derives the ranking inputs for one (fixture, sample)
pairing against a requirement profile.

Derived values
--------------
target_midpoint = (intensity_min + intensity_max) / 2
deviation       = |intensity - target_midpoint|
in_range        = intensity_min <= intensity <= intensity_max
meets_minimum   = intensity >= intensity_min
power_score     = wattage_score(size_category, power_rating)
distance_score  = distance_preference_score(distance_cm)

Wattage suitability (0–3)
-------------------------
    Large  : >= 24W → 3;  >= 10W → 2;  else 0
    Medium : >= 10W → 2;  else 1
    Small  : <= 10W → 3;  <= 24W → 2;  else 1

Larger plants need coverage, so higher power wins.  Small plants prefer
low-power fixtures but can still use a stronger one mounted farther away.

Distance preference (0–3)
-------------------------
    30 cm → 3;  60 cm → 2;  20 cm → 1;  any other distance → 0

Exact matches only: 29 cm or 35 cm score 0.

All functions here are pure — no catalog access, no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass

from grow_light_advisor.catalog.fixture_catalog import Candidate
from grow_light_advisor.models.requirement import RequirementProfile
from grow_light_advisor.taxonomy.size_taxonomy import (
    HIGH_POWER_THRESHOLD_W,
    LOW_POWER_THRESHOLD_W,
    SizeCategory,
)

# Mounting distance (cm) → preference score
_DISTANCE_PREFERENCE: dict[float, int] = {
    30.0: 3,
    60.0: 2,
    20.0: 1,
}


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate annotated with every value the ranking looks at.

    Attributes:
        candidate:      The underlying (fixture, sample) pairing.
        power_score:    Wattage suitability for the plant size (0–3).
        in_range:       Intensity lies inside [intensity_min, intensity_max].
        distance_score: Mounting distance preference (0–3).
        meets_minimum:  Intensity is at least intensity_min.
        deviation:      Distance of intensity from the target midpoint.
    """

    candidate:      Candidate
    power_score:    int
    in_range:       bool
    distance_score: int
    meets_minimum:  bool
    deviation:      float

    @property
    def power_rating(self) -> float:
        return self.candidate.fixture.power_rating

    @property
    def distance_cm(self) -> float:
        return self.candidate.sample.distance_cm

    @property
    def intensity(self) -> float:
        return self.candidate.sample.intensity


def wattage_score(size_category: SizeCategory, power_rating: float) -> int:
    """Score how well a fixture's rated power suits the plant size."""
    if size_category == SizeCategory.LARGE:
        if power_rating >= HIGH_POWER_THRESHOLD_W:
            return 3
        if power_rating >= LOW_POWER_THRESHOLD_W:
            return 2
        return 0
    if size_category == SizeCategory.MEDIUM:
        if power_rating >= LOW_POWER_THRESHOLD_W:
            return 2
        return 1
    if size_category == SizeCategory.SMALL:
        if power_rating <= LOW_POWER_THRESHOLD_W:
            return 3
        if power_rating <= HIGH_POWER_THRESHOLD_W:
            return 2
        return 1
    # Unvalidated profile with an unknown size: neutral score.
    return 1


def distance_preference_score(distance_cm: float) -> int:
    """Score a mounting distance; unlisted distances score 0."""
    return _DISTANCE_PREFERENCE.get(distance_cm, 0)


def score_candidate(
    candidate: Candidate,
    profile:   RequirementProfile,
) -> ScoredCandidate:
    """Compute all ranking inputs for one candidate."""
    intensity = candidate.sample.intensity
    midpoint  = profile.target_midpoint

    return ScoredCandidate(
        candidate=candidate,
        power_score=wattage_score(profile.size_category, candidate.fixture.power_rating),
        in_range=profile.intensity_min <= intensity <= profile.intensity_max,
        distance_score=distance_preference_score(candidate.sample.distance_cm),
        meets_minimum=intensity >= profile.intensity_min,
        deviation=abs(intensity - midpoint),
    )


def build_reasoning(scored: ScoredCandidate, profile: RequirementProfile) -> str:
    """Assemble a human-readable explanation for a scored candidate.

    Returns a semicolon-separated list of tokens such as:
        "24W suits a Medium plant; 277 PPFD is inside the 150-350 target;
        60 cm is an acceptable mounting distance"
    """
    label = scored.candidate.fixture.label
    size  = str(profile.size_category)
    lo, hi = profile.intensity_min, profile.intensity_max
    reasons: list[str] = []

    if scored.power_score >= 3:
        reasons.append(f"{label} is an ideal power level for a {size} plant")
    elif scored.power_score == 2:
        reasons.append(f"{label} suits a {size} plant")
    else:
        reasons.append(f"{label} is a compromise power level for a {size} plant")

    if scored.in_range:
        reasons.append(
            f"{scored.intensity:g} PPFD is inside the {lo:g}-{hi:g} target"
        )
    elif scored.meets_minimum:
        reasons.append(
            f"{scored.intensity:g} PPFD exceeds the {lo:g}-{hi:g} target; "
            "no in-range option at this power"
        )
    else:
        reasons.append(
            f"{scored.intensity:g} PPFD is below the {lo:g}-{hi:g} target; "
            "closest available option"
        )

    if scored.distance_score == 3:
        reasons.append(f"{scored.distance_cm:g} cm is the ideal mounting distance")
    elif scored.distance_score == 2:
        reasons.append(f"{scored.distance_cm:g} cm is an acceptable mounting distance")
    elif scored.distance_score == 1:
        reasons.append(f"{scored.distance_cm:g} cm is a close mounting distance")
    else:
        reasons.append(f"Mount at {scored.distance_cm:g} cm")

    return "; ".join(reasons)
