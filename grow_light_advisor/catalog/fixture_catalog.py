"""
Fixture catalog: the read-only measurement table the selector ranks over.

``FixtureCatalog`` is built once at process start (``reference_catalog()``
or ``load_catalog_file()``) and shared by every selection call.  It is a
frozen model holding a tuple, so concurrent readers need no locking.

``all_candidates()`` flattens the nested fixture → sample table into one
flat list of ``Candidate`` records.  Order is catalog order, then sample
order within each fixture; ``position`` records that index so the final
stable-sort tie-break can be checked in tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict

from grow_light_advisor.models.fixture import DistanceSample, Fixture


@dataclass(frozen=True)
class Candidate:
    """One (fixture, sample) pairing considered during a selection call.

    Attributes:
        fixture:  The fixture the sample belongs to.
        sample:   The distance sample being evaluated.
        position: 0-based index in the flattened catalog order.
    """

    fixture:  Fixture
    sample:   DistanceSample
    position: int


class FixtureCatalog(BaseModel):
    """Immutable ordered collection of fixtures.

    An empty catalog can be constructed; selecting against it raises
    ``NoCandidatesAvailable``.
    """

    model_config = ConfigDict(frozen=True)

    fixtures: tuple[Fixture, ...] = ()

    def __len__(self) -> int:
        return len(self.fixtures)

    def all_candidates(self) -> list[Candidate]:
        """Flatten every (fixture, sample) pair in catalog order."""
        candidates: list[Candidate] = []
        for fixture in self.fixtures:
            for sample in fixture.samples:
                candidates.append(
                    Candidate(fixture=fixture, sample=sample, position=len(candidates))
                )
        return candidates

    def summary(self) -> dict[str, Any]:
        """Counts and value sets for CLI display."""
        distances = sorted({s.distance_cm for f in self.fixtures for s in f.samples})
        return {
            "fixture_count": len(self.fixtures),
            "sample_count":  sum(len(f.samples) for f in self.fixtures),
            "power_ratings": [f.power_rating for f in self.fixtures],
            "distances_cm":  distances,
        }
