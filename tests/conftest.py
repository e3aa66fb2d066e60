"""
Shared pytest fixtures for the Grow Light Advisor test suite.

Provides:
  - ``catalog``: the built-in reference catalog (7W/10W/24W/28W).
  - ``empty_catalog``: a catalog with no fixtures.
  - ``make_fixture``: factory for small hand-built fixtures.
  - ``medium_profile``: a typical Medium-plant requirement profile.
"""

from __future__ import annotations

from typing import Callable

import pytest

from grow_light_advisor.catalog import FixtureCatalog, reference_catalog
from grow_light_advisor.models.fixture import DistanceSample, Fixture
from grow_light_advisor.models.requirement import RequirementProfile
from grow_light_advisor.taxonomy.size_taxonomy import SizeCategory


@pytest.fixture
def catalog() -> FixtureCatalog:
    """The reference catalog shipped with the package."""
    return reference_catalog()


@pytest.fixture
def empty_catalog() -> FixtureCatalog:
    return FixtureCatalog(fixtures=())


@pytest.fixture
def make_fixture() -> Callable[..., Fixture]:
    """Return a factory: ``make_fixture(24, (30, 400), (60, 200))``.

    Each row is ``(distance_cm, intensity)``; illuminance defaults to 0.
    """

    def _make(power: float, *rows: tuple[float, float]) -> Fixture:
        return Fixture(
            power_rating=power,
            samples=tuple(
                DistanceSample(distance_cm=d, intensity=ppfd) for d, ppfd in rows
            ),
        )

    return _make


@pytest.fixture
def medium_profile() -> RequirementProfile:
    return RequirementProfile(
        intensity_min=150.0,
        intensity_max=350.0,
        size_category=SizeCategory.MEDIUM,
    )
