"""
Built-in reference catalog: four full-spectrum grow lights (7W, 10W, 24W,
28W) measured at six distances each.

Rows are ``(distance_cm, ppfd, lux)`` from the manufacturer's test sheets.
"""

from __future__ import annotations

from grow_light_advisor.catalog.fixture_catalog import FixtureCatalog
from grow_light_advisor.models.fixture import DistanceSample, Fixture

REFERENCE_MEASUREMENTS: dict[float, list[tuple[float, float, float]]] = {
    7.0: [
        (20,  604,  36441),
        (30,  469,  28189),
        (60,   60,   3634),
        (100,  40,   2409),
        (150,  15,    908),
        (200,   6,    369),
    ],
    10.0: [
        (20,  876,  52917),
        (30,  431,  26054),
        (60,   91,   5501),
        (100,  39,   2374),
        (150,  14,    850),
        (200,  10,    618),
    ],
    24.0: [
        (20,  2266, 139065),
        (30,  1166,  71494),
        (60,   277,  17003),
        (100,  102,   6240),
        (150,   39,   2338),
        (200,   22,   1325),
    ],
    28.0: [
        (20,  1154,  69500),
        (30,   421,  25704),
        (60,   124,   7469),
        (100,   43,   2586),
        (150,   19,   1140),
        (200,   12,    720),
    ],
}


def reference_catalog() -> FixtureCatalog:
    """Build the reference catalog in ascending power order."""
    fixtures = [
        Fixture(
            power_rating=power,
            samples=tuple(
                DistanceSample(distance_cm=d, intensity=ppfd, illuminance=lux)
                for d, ppfd, lux in rows
            ),
        )
        for power, rows in REFERENCE_MEASUREMENTS.items()
    ]
    return FixtureCatalog(fixtures=tuple(fixtures))
