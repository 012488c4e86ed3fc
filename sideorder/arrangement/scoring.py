"""
Constraint scoring module

Scores an arrangement by summing the weights of the constraints it
satisfies. Constraints are independent: two constraints on the same pair
of tracks both count.
"""

from typing import List, Sequence

from sideorder.arrangement.sides import on_same_side
from sideorder.models.constraints import Adjacent, AtPosition, Constraint, OnSameSide
from sideorder.models.medium import Medium
from sideorder.models.track import Tracklist


def is_satisfied(
    constraint: Constraint,
    tracklist: Tracklist,
    medium: Medium
) -> bool:
    """
    Check a single constraint against an arrangement.

    Titles that do not appear in the tracklist never satisfy a constraint.

    Args:
        constraint: AtPosition, Adjacent or OnSameSide
        tracklist: Tracks in arrangement order
        medium: Medium used for side assignment

    Returns:
        True if the constraint holds

    Raises:
        TypeError: If `constraint` is not one of the known kinds
    """
    if isinstance(constraint, AtPosition):
        if not 0 <= constraint.index < len(tracklist):
            return False
        return tracklist[constraint.index].title == constraint.title

    if isinstance(constraint, Adjacent):
        titles = tracklist.titles()
        return any(
            current == constraint.first and following == constraint.second
            for current, following in zip(titles, titles[1:])
        )

    if isinstance(constraint, OnSameSide):
        return on_same_side(tracklist, medium, constraint.first, constraint.second)

    raise TypeError(f"Unknown constraint kind: {type(constraint).__name__}")


def score_tracklist(
    tracklist: Tracklist,
    constraints: Sequence[Constraint],
    medium: Medium
) -> int:
    """
    Score an arrangement against weighted constraints.

    Args:
        tracklist: Tracks in arrangement order
        constraints: Constraints to evaluate
        medium: Medium used for side assignment

    Returns:
        Sum of the weights of satisfied constraints, between 0 and
        max_score(constraints)
    """
    return sum(
        constraint.weight
        for constraint in constraints
        if is_satisfied(constraint, tracklist, medium)
    )


score = score_tracklist


def max_score(constraints: Sequence[Constraint]) -> int:
    """Best achievable score for a constraint set, whatever the arrangement."""
    return sum(constraint.weight for constraint in constraints)


def unsatisfied_constraints(
    tracklist: Tracklist,
    constraints: Sequence[Constraint],
    medium: Medium
) -> List[Constraint]:
    """Constraints that do not hold for this arrangement, in input order."""
    return [
        constraint
        for constraint in constraints
        if not is_satisfied(constraint, tracklist, medium)
    ]
