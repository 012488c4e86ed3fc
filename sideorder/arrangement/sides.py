"""
Medium feasibility and side assignment.

Both use the same greedy first-fit pass: walk the tracklist left to right,
keep filling the current side while the running total stays within the
per-side limit, and open the next side as soon as a track would overflow.

This is not general bin-packing feasibility. Tracks keep their arrangement
order and each side takes a contiguous run, so [6, 5, 4, 5] on two sides of
10 is rejected (6 | 5+4 | 5) even though the same tracks regroup as
6+4 | 5+5. The approximation is intentional.
"""

from typing import List

from sideorder.models.medium import Medium
from sideorder.models.track import Tracklist


def assign_sides(tracklist: Tracklist, medium: Medium) -> List[int]:
    """
    Compute the 0-based side index of every track position.

    A track longer than the per-side limit still gets a side of its own;
    `fits` rejects such tracklists before looking at the assignment.

    Args:
        tracklist: Tracks in arrangement order
        medium: Medium providing the per-side limit

    Returns:
        List with one side index per track
    """
    assignment = []
    side = 0
    side_total = 0.0

    for position, track in enumerate(tracklist):
        if position > 0 and side_total + track.duration > medium.max_duration_per_side:
            side += 1
            side_total = 0.0
        side_total += track.duration
        assignment.append(side)

    return assignment


def sides_used(tracklist: Tracklist, medium: Medium) -> int:
    """Number of sides the greedy pass needs (0 for an empty tracklist)."""
    assignment = assign_sides(tracklist, medium)
    return assignment[-1] + 1 if assignment else 0


def side_durations(tracklist: Tracklist, medium: Medium) -> List[float]:
    """Total duration placed on each side used by the greedy pass."""
    totals: List[float] = []
    for track, side in zip(tracklist, assign_sides(tracklist, medium)):
        if side == len(totals):
            totals.append(0.0)
        totals[side] += track.duration
    return totals


def fits(tracklist: Tracklist, medium: Medium) -> bool:
    """
    Check whether a tracklist can be cut onto the medium in this order.

    Args:
        tracklist: Tracks in arrangement order
        medium: Target medium

    Returns:
        True if the greedy split needs no more than `medium.sides` sides
    """
    # Necessary, not sufficient
    if tracklist.duration() > medium.capacity():
        return False

    if any(track.duration > medium.max_duration_per_side for track in tracklist):
        return False

    return sides_used(tracklist, medium) <= medium.sides


def on_same_side(
    tracklist: Tracklist,
    medium: Medium,
    first: str,
    second: str
) -> bool:
    """
    Check whether two titles land on the same side.

    Titles resolve to their first occurrence. A title missing from the
    tracklist makes the answer False.
    """
    first_position = tracklist.index_of(first)
    second_position = tracklist.index_of(second)
    if first_position < 0 or second_position < 0:
        return False

    assignment = assign_sides(tracklist, medium)
    return assignment[first_position] == assignment[second_position]
