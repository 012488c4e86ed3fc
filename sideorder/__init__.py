"""
sideorder - arrange tracks onto the sides of a vinyl record or cassette.

Contains:
- Track, Tracklist, Medium and constraint value objects
- Permutation generation, side assignment, feasibility and scoring
- Job loading and batch evaluation
"""

from sideorder.models import (
    MEDIUM_PRESETS,
    Adjacent,
    AtPosition,
    Constraint,
    Medium,
    OnSameSide,
    Track,
    Tracklist,
    get_medium,
)
from sideorder.arrangement import (
    Evaluation,
    TracklistPermutations,
    assign_sides,
    evaluate_permutations,
    fits,
    generate_permutations,
    max_score,
    on_same_side,
    score,
    score_tracklist,
)

__version__ = "0.1.0"

__all__ = [
    "Track",
    "Tracklist",
    "Medium",
    "MEDIUM_PRESETS",
    "get_medium",
    "Constraint",
    "AtPosition",
    "Adjacent",
    "OnSameSide",
    "TracklistPermutations",
    "generate_permutations",
    "assign_sides",
    "fits",
    "on_same_side",
    "score",
    "score_tracklist",
    "max_score",
    "Evaluation",
    "evaluate_permutations",
]
