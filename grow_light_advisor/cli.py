"""
Grow Light Advisor — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Load the fixture catalog and run the selection.
  5. Report result to stdout.

Install and run::

    pip install -e .
    grow-light-advisor --help
    grow-light-advisor validate-config
    grow-light-advisor show-catalog
    grow-light-advisor recommend --min 150 --max 350 --size Medium --write-reports
    grow-light-advisor recommend-from-analysis analysis.json --output-dir out/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from grow_light_advisor.taxonomy.size_taxonomy import SizeCategory

app = typer.Typer(
    name="grow-light-advisor",
    help="Grow Light Advisor — pick a fixture and mounting distance for a plant.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from grow_light_advisor.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from grow_light_advisor.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_catalog_or_exit(config, catalog_file: Optional[str] = None):
    """Load the configured catalog, or the reference catalog when none is set."""
    from pydantic import ValidationError

    from grow_light_advisor.catalog import load_catalog_file, reference_catalog

    path = catalog_file or config.catalog.catalog_file
    if not path:
        return reference_catalog()

    try:
        catalog = load_catalog_file(Path(path))
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except (json.JSONDecodeError, ValueError, ValidationError) as exc:
        typer.echo(f"[ERROR] Catalog validation failed:\n{exc}", err=True)
        raise typer.Exit(code=1)

    if len(catalog) == 0:
        typer.echo(f"[ERROR] Catalog file contains no fixtures: {path}", err=True)
        raise typer.Exit(code=1)
    return catalog


def _run_selection(
    profile, config, catalog_file, alternatives, output_dir, write_reports=False,
) -> None:
    """Rank, print the winner + alternatives, optionally write reports.

    Reports go to ``output_dir`` when given, else to
    ``config.recommend.output_dir`` when ``write_reports`` is set.
    """
    from grow_light_advisor.recommendations.ranker import (
        NoCandidatesAvailable,
        rank_candidates,
        select_with_alternatives,
    )
    from grow_light_advisor.recommendations.reporter import (
        write_ranking_csv,
        write_recommendation_json,
    )
    from grow_light_advisor.recommendations.scorer import build_reasoning

    catalog = _load_catalog_or_exit(config, catalog_file)
    n_alt = config.recommend.alternatives if alternatives is None else alternatives

    try:
        best, runners_up = select_with_alternatives(profile, catalog, n=n_alt)
    except (NoCandidatesAvailable, ValueError) as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(
        f"Target: {profile.intensity_min:g}-{profile.intensity_max:g} PPFD "
        f"({profile.size_category})"
    )
    typer.echo("")
    typer.echo("RECOMMENDATION:")
    typer.echo(f"  Fixture:   {best.candidate.fixture.label}")
    typer.echo(f"  Distance:  {best.distance_cm:g} cm")
    typer.echo(f"  PPFD:      {best.intensity:g}")
    typer.echo(f"  Reasoning: {build_reasoning(best, profile)}")

    if runners_up:
        typer.echo("")
        typer.echo("ALTERNATIVES:")
        for rank, sc in enumerate(runners_up, start=2):
            status = "in range" if sc.in_range else "out of range"
            typer.echo(
                f"  {rank}. {sc.candidate.fixture.label} @ {sc.distance_cm:g} cm, "
                f"{sc.intensity:g} PPFD ({status})"
            )

    if write_reports and not output_dir:
        output_dir = config.recommend.output_dir

    if output_dir:
        out = Path(output_dir)
        csv_path  = write_ranking_csv(rank_candidates(profile, catalog), profile, out)
        json_path = write_recommendation_json(best, runners_up, profile, out)
        typer.echo("")
        typer.echo(f"  Ranking CSV:         {csv_path}")
        typer.echo(f"  Recommendation JSON: {json_path}")


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Catalog file:   {config.catalog.catalog_file or '(reference catalog)'}")
    typer.echo(f"  Alternatives:   {config.recommend.alternatives}")
    typer.echo(f"  Output dir:     {config.recommend.output_dir}")
    typer.echo(f"  Log level:      {config.logging.level}")
    typer.echo(f"  Debug mode:     {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("show-catalog")
def show_catalog(
    catalog_file: Optional[str] = typer.Option(
        None,
        "--catalog",
        help="Path to a JSON catalog file. Overrides config.catalog.catalog_file.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Print every fixture and its measured distance table."""
    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    catalog = _load_catalog_or_exit(config, catalog_file)
    summary = catalog.summary()

    typer.echo(
        f"Catalog: {summary['fixture_count']} fixture(s), "
        f"{summary['sample_count']} sample(s)"
    )
    for fixture in catalog.fixtures:
        typer.echo("")
        typer.echo(f"  {fixture.label}")
        for s in fixture.samples:
            typer.echo(
                f"    {s.distance_cm:>6g} cm  {s.intensity:>7g} PPFD  "
                f"{s.illuminance:>8g} lux"
            )


@app.command("recommend")
def recommend(
    intensity_min: float = typer.Option(..., "--min", help="Minimum target PPFD."),
    intensity_max: float = typer.Option(..., "--max", help="Maximum target PPFD."),
    size: SizeCategory = typer.Option(
        ...,
        "--size",
        case_sensitive=False,
        help="Plant size category.",
    ),
    alternatives: Optional[int] = typer.Option(
        None,
        "--alternatives",
        help="Number of runner-up options to show (default from config).",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        help="Write ranking CSV + recommendation JSON into this directory.",
    ),
    write_reports: bool = typer.Option(
        False,
        "--write-reports",
        help="Write reports into config.recommend.output_dir (ignored with --output-dir).",
    ),
    catalog_file: Optional[str] = typer.Option(
        None,
        "--catalog",
        help="Path to a JSON catalog file. Overrides config.catalog.catalog_file.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Recommend a fixture and distance for a PPFD window and plant size."""
    from pydantic import ValidationError

    from grow_light_advisor.models.requirement import RequirementProfile

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    try:
        profile = RequirementProfile(
            intensity_min=intensity_min,
            intensity_max=intensity_max,
            size_category=size,
        )
    except ValidationError as exc:
        typer.echo(f"[ERROR] Invalid requirement:\n{exc}", err=True)
        raise typer.Exit(code=1)

    _run_selection(
        profile, config, catalog_file, alternatives, output_dir, write_reports,
    )


@app.command("recommend-from-analysis")
def recommend_from_analysis(
    analysis_file: str = typer.Argument(
        ...,
        help="JSON file with one plant light analysis (camelCase or snake_case keys).",
    ),
    alternatives: Optional[int] = typer.Option(
        None,
        "--alternatives",
        help="Number of runner-up options to show (default from config).",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        help="Write ranking CSV + recommendation JSON into this directory.",
    ),
    write_reports: bool = typer.Option(
        False,
        "--write-reports",
        help="Write reports into config.recommend.output_dir (ignored with --output-dir).",
    ),
    catalog_file: Optional[str] = typer.Option(
        None,
        "--catalog",
        help="Path to a JSON catalog file. Overrides config.catalog.catalog_file.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Recommend a fixture from a saved plant analysis payload."""
    from pydantic import ValidationError

    from grow_light_advisor.models.plant import load_plant_analysis

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    try:
        analysis = load_plant_analysis(Path(analysis_file))
        profile  = analysis.to_requirement_profile()
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except (json.JSONDecodeError, ValueError, ValidationError) as exc:
        typer.echo(f"[ERROR] Invalid plant analysis:\n{exc}", err=True)
        raise typer.Exit(code=1)

    name = analysis.common_name
    if analysis.scientific_name:
        name = f"{name} ({analysis.scientific_name})"
    typer.echo(f"Plant: {name}")
    if analysis.light_summary:
        typer.echo(f"  {analysis.light_summary}")

    _run_selection(
        profile, config, catalog_file, alternatives, output_dir, write_reports,
    )


if __name__ == "__main__":
    app()
