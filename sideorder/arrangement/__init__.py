"""Arrangement evaluation: permutations, side assignment and scoring"""

from sideorder.arrangement.permutations import (
    TracklistPermutations,
    generate_permutations,
    unique_permutations,
)
from sideorder.arrangement.sides import (
    assign_sides,
    fits,
    on_same_side,
    side_durations,
    sides_used,
)
from sideorder.arrangement.scoring import (
    is_satisfied,
    max_score,
    score,
    score_tracklist,
    unsatisfied_constraints,
)
from sideorder.arrangement.evaluator import (
    Evaluation,
    evaluate_arrangement,
    evaluate_permutations,
)

__all__ = [
    "TracklistPermutations",
    "generate_permutations",
    "unique_permutations",
    "assign_sides",
    "fits",
    "on_same_side",
    "side_durations",
    "sides_used",
    "is_satisfied",
    "max_score",
    "score",
    "score_tracklist",
    "unsatisfied_constraints",
    "Evaluation",
    "evaluate_arrangement",
    "evaluate_permutations",
]
