"""
Recommendation ranker: orders every catalog candidate for a requirement
profile and returns the best (fixture, distance) pairing.

Usage flow
----------
1. rank_candidates(profile, catalog)
   -> list[ScoredCandidate]  (full ranking, best first)

2. select(profile, catalog)
   -> Recommendation  (power_rating, distance_cm, intensity of the winner)

3. select_with_alternatives(profile, catalog, n=3)
   -> (best ScoredCandidate, next n runners-up)  — CLI / report use

Ranking order
-------------
Candidates are compared criterion by criterion; the first criterion that
differs decides.

    1. power_score      higher wins
    2. in_range         True beats False
    3. distance_score   higher wins    (only when both are in range)
    4. meets_minimum    True beats False  (only when both are out of range)
    5. deviation        lower wins
    6. catalog order    earlier wins   (stable sort)

Criteria 3 and 4 only apply once criterion 2 has tied, so both candidates
share the same ``in_range`` value when they are evaluated.

Both remaining tie shapes (in range with equal distance score, out of range
with equal meets_minimum) fall through to the same deviation comparison.
"""

from __future__ import annotations

import functools
import logging
from typing import Callable, NamedTuple

from grow_light_advisor.catalog.fixture_catalog import FixtureCatalog
from grow_light_advisor.models.requirement import Recommendation, RequirementProfile
from grow_light_advisor.recommendations.scorer import ScoredCandidate, score_candidate

logger = logging.getLogger(__name__)


class NoCandidatesAvailable(RuntimeError):
    """Raised when the catalog yields no (fixture, sample) candidates.

    The catalog is static, so this is a deployment or configuration defect,
    not a per-request condition.
    """


class RankingCriterion(NamedTuple):
    """One step of the tie-break chain.

    Attributes:
        name:             Criterion name, for debugging and tests.
        key:              Extracts a comparable value from a scored candidate.
        higher_is_better: Direction of the comparison.
    """

    name:             str
    key:              Callable[[ScoredCandidate], float]
    higher_is_better: bool


RANKING_CRITERIA: tuple[RankingCriterion, ...] = (
    RankingCriterion("power_score", lambda s: s.power_score, True),
    RankingCriterion("in_range", lambda s: int(s.in_range), True),
    RankingCriterion(
        "distance_score",
        lambda s: s.distance_score if s.in_range else 0,
        True,
    ),
    RankingCriterion(
        "meets_minimum",
        lambda s: int(s.meets_minimum) if not s.in_range else 0,
        True,
    ),
    RankingCriterion("deviation", lambda s: s.deviation, False),
)


def compare_candidates(a: ScoredCandidate, b: ScoredCandidate) -> int:
    """Fold ``RANKING_CRITERIA`` into one comparison.

    Returns:
        Negative if ``a`` ranks above ``b``, positive if below, 0 on a full tie.
    """
    for criterion in RANKING_CRITERIA:
        ka, kb = criterion.key(a), criterion.key(b)
        if ka == kb:
            continue
        a_wins = ka > kb if criterion.higher_is_better else ka < kb
        return -1 if a_wins else 1
    return 0


def rank_candidates(
    profile: RequirementProfile,
    catalog: FixtureCatalog,
) -> list[ScoredCandidate]:
    """Score and order every catalog candidate, best first.

    Full ties keep catalog order (``sorted`` is stable).  Returns an empty
    list for an empty catalog.
    """
    scored = [score_candidate(c, profile) for c in catalog.all_candidates()]
    return sorted(scored, key=functools.cmp_to_key(compare_candidates))


def _best_or_raise(ranked: list[ScoredCandidate]) -> ScoredCandidate:
    if not ranked:
        raise NoCandidatesAvailable(
            "Fixture catalog has no distance samples to rank. "
            "Check the catalog configuration."
        )
    return ranked[0]


def to_recommendation(scored: ScoredCandidate) -> Recommendation:
    """Expose only the winner's fixture and sample values."""
    return Recommendation(
        power_rating=scored.power_rating,
        distance_cm=scored.distance_cm,
        intensity=scored.intensity,
    )


def select(
    profile: RequirementProfile,
    catalog: FixtureCatalog,
) -> Recommendation:
    """Return the top-ranked fixture/distance pairing for ``profile``.

    Raises:
        NoCandidatesAvailable: If the catalog has no candidates.
    """
    best = _best_or_raise(rank_candidates(profile, catalog))
    logger.debug(
        "Selected %s @ %g cm (%g PPFD) for %s %g-%g",
        best.candidate.fixture.label,
        best.distance_cm,
        best.intensity,
        profile.size_category,
        profile.intensity_min,
        profile.intensity_max,
    )
    return to_recommendation(best)


def select_with_alternatives(
    profile: RequirementProfile,
    catalog: FixtureCatalog,
    n:       int = 3,
) -> tuple[ScoredCandidate, list[ScoredCandidate]]:
    """Return the winner plus up to ``n`` runners-up in rank order.

    Raises:
        NoCandidatesAvailable: If the catalog has no candidates.
        ValueError: If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}.")
    ranked = rank_candidates(profile, catalog)
    best = _best_or_raise(ranked)
    return best, ranked[1:n + 1]
