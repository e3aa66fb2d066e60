"""
Catalog file loader: JSON → ``FixtureCatalog``.

File format
-----------
A JSON array of fixture objects, in catalog order::

    [
      {
        "power_rating": 24,
        "samples": [
          {"distance_cm": 20, "intensity": 2266, "illuminance": 139065},
          {"distance_cm": 30, "intensity": 1166, "illuminance": 71494}
        ]
      }
    ]

The test-sheet export layout is also accepted per record::

    {"wattage": "24W", "distances": [{"distanceCm": 20, "ppfd": 2266, "lux": 139065}]}

Validation rules
----------------
- The document must be a JSON array of objects.
- Test-sheet records need ``distances`` to be an array of objects.
- Each record must validate as a ``Fixture`` (positive power, non-empty
  samples, unique distances, non-negative measurements).
- Power ratings must be unique across the catalog.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from grow_light_advisor.catalog.fixture_catalog import FixtureCatalog
from grow_light_advisor.models.fixture import Fixture

log = logging.getLogger(__name__)


def _normalize_record(rec: dict[str, Any], index: int) -> dict[str, Any]:
    """Map a test-sheet export record onto ``Fixture`` field names.

    Raises:
        ValueError: If ``distances`` is not an array of objects.
    """
    if "power_rating" in rec or "wattage" not in rec:
        return rec

    rows = rec.get("distances", [])
    if not isinstance(rows, list):
        raise ValueError(f"Fixture at index {index}: 'distances' must be a JSON array.")
    for j, row in enumerate(rows):
        if not isinstance(row, dict):
            raise ValueError(
                f"Fixture at index {index}: distance row {j} must be a JSON object."
            )

    wattage = rec["wattage"]
    if isinstance(wattage, str):
        wattage = wattage.strip().upper().removesuffix("W").strip()

    return {
        "power_rating": wattage,
        "samples": [
            {
                "distance_cm": row.get("distanceCm", row.get("distance_cm")),
                "intensity":   row.get("ppfd", row.get("intensity")),
                "illuminance": row.get("lux", row.get("illuminance", 0.0)),
            }
            for row in rows
        ],
    }


def parse_catalog_records(records: Any) -> FixtureCatalog:
    """Validate a decoded JSON document and build a catalog.

    Raises:
        ValueError: If the document is not an array, a record or distance row
            is not an object, or power ratings repeat.
        pydantic.ValidationError: If any record fails ``Fixture`` validation.
    """
    if not isinstance(records, list):
        raise ValueError("Catalog document must contain a JSON array of fixtures.")

    fixtures: list[Fixture] = []
    seen_power: set[float] = set()
    for i, rec in enumerate(records):
        if not isinstance(rec, dict):
            raise ValueError(f"Fixture at index {i} must be a JSON object.")
        fixture = Fixture.model_validate(_normalize_record(rec, i))
        if fixture.power_rating in seen_power:
            raise ValueError(
                f"Duplicate power_rating {fixture.label} at index {i}."
            )
        seen_power.add(fixture.power_rating)
        fixtures.append(fixture)

    return FixtureCatalog(fixtures=tuple(fixtures))


def load_catalog_file(path: Path) -> FixtureCatalog:
    """Load a catalog from a JSON file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: On a malformed document.
        pydantic.ValidationError: On invalid fixture records.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    with path.open(encoding="utf-8") as f:
        records = json.load(f)

    catalog = parse_catalog_records(records)
    log.info(
        "Loaded catalog from %s: %d fixture(s), %d sample(s)",
        path, len(catalog), len(catalog.all_candidates()),
    )
    return catalog
