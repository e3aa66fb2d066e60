"""
Recommendation report writer: CSV and JSON output for a selection run.

All functions are pure I/O — no ranking logic.  They consume in-memory
ScoredCandidate lists and write human-readable + machine-readable files.

Output files
------------
  <output_dir>/
    ranking_{size}_{date}.csv          -- every candidate, best first
    recommendation_{size}_{date}.json  -- winner + alternatives, structured
"""

from __future__ import annotations

import csv
import json
import logging
from datetime import date
from pathlib import Path

from grow_light_advisor.models.requirement import RequirementProfile
from grow_light_advisor.recommendations.scorer import ScoredCandidate, build_reasoning

logger = logging.getLogger(__name__)

_SCHEMA_VERSION = "v1.0.0"


def _candidate_row(rank: int, sc: ScoredCandidate) -> dict:
    return {
        "rank":           rank,
        "power_rating":   sc.power_rating,
        "distance_cm":    sc.distance_cm,
        "intensity":      sc.intensity,
        "illuminance":    sc.candidate.sample.illuminance,
        "power_score":    sc.power_score,
        "in_range":       sc.in_range,
        "distance_score": sc.distance_score,
        "meets_minimum":  sc.meets_minimum,
        "deviation":      round(sc.deviation, 2),
    }


def write_ranking_csv(
    ranked:     list[ScoredCandidate],
    profile:    RequirementProfile,
    output_dir: Path,
    run_date:   date | None = None,
) -> Path:
    """Write the full candidate ranking to a CSV file.

    Columns: rank, power_rating, distance_cm, intensity, illuminance,
             power_score, in_range, distance_score, meets_minimum, deviation.

    Args:
        ranked:     Output of rank_candidates(), best first.
        profile:    Profile the ranking was computed for (used in filename).
        output_dir: Directory to write the file (created if missing).
        run_date:   Date label for the filename. Defaults to today.

    Returns:
        Path to the written CSV file.
    """
    if run_date is None:
        run_date = date.today()

    output_dir.mkdir(parents=True, exist_ok=True)
    size = str(profile.size_category).lower()
    csv_path = output_dir / f"ranking_{size}_{run_date}.csv"

    fieldnames = [
        "rank", "power_rating", "distance_cm", "intensity", "illuminance",
        "power_score", "in_range", "distance_score", "meets_minimum", "deviation",
    ]

    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for rank, sc in enumerate(ranked, start=1):
            writer.writerow(_candidate_row(rank, sc))

    logger.info("Ranking CSV written: %s (%d rows)", csv_path, len(ranked))
    return csv_path


def write_recommendation_json(
    best:         ScoredCandidate,
    alternatives: list[ScoredCandidate],
    profile:      RequirementProfile,
    output_dir:   Path,
    run_date:     date | None = None,
) -> Path:
    """Write the winning pairing and its runners-up to a JSON file.

    Args:
        best:         Top-ranked candidate.
        alternatives: Runners-up in rank order.
        profile:      Requirement profile used for the selection.
        output_dir:   Target directory.
        run_date:     Date label. Defaults to today.

    Returns:
        Path to the written JSON file.
    """
    if run_date is None:
        run_date = date.today()

    output_dir.mkdir(parents=True, exist_ok=True)
    size = str(profile.size_category).lower()
    json_path = output_dir / f"recommendation_{size}_{run_date}.json"

    payload: dict = {
        "schema_version": _SCHEMA_VERSION,
        "generated_at":   run_date.isoformat(),
        "profile": {
            "intensity_min": profile.intensity_min,
            "intensity_max": profile.intensity_max,
            "size_category": str(profile.size_category),
        },
        "recommendation": {
            "power_rating": best.power_rating,
            "distance_cm":  best.distance_cm,
            "intensity":    best.intensity,
            "reasoning":    build_reasoning(best, profile),
        },
        "alternatives": [
            _candidate_row(rank, sc)
            for rank, sc in enumerate(alternatives, start=2)
        ],
    }

    json_path.write_text(json.dumps(payload, indent=2, default=str), encoding="utf-8")
    logger.info("Recommendation JSON written: %s", json_path)
    return json_path
