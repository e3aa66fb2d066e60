"""
Recommendation engine: ranks every (fixture, distance) pairing in the
catalog against a plant's PPFD window and size, and returns the best one.

Modules
-------
scorer   : ScoredCandidate dataclass + wattage_score() +
           distance_preference_score() + score_candidate() +
           build_reasoning() — pure functions, no I/O.
ranker   : RANKING_CRITERIA + compare_candidates() + rank_candidates() +
           select() + select_with_alternatives() + NoCandidatesAvailable.
reporter : write_ranking_csv() + write_recommendation_json() — file output.
"""
