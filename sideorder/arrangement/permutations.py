"""
Lazy enumeration of every ordering of a track set.

Orderings come out lexicographically by source index and reference the
source Track objects directly. Nothing beyond the current ordering is held
in memory, so the n! sequence can be cut short at any point.
"""

import math
from itertools import permutations
from typing import Iterator, Sequence, Set, Tuple

from sideorder.models.track import Track, Tracklist


def generate_permutations(tracks: Sequence[Track]) -> Iterator[Tracklist]:
    """
    Yield every ordering of `tracks` as a Tracklist.

    Tracks with identical titles are not collapsed: a source of n tracks
    always yields n! orderings, some of which may compare equal.

    Args:
        tracks: Source tracks

    Returns:
        Iterator over n! tracklists
    """
    for ordering in permutations(tracks):
        yield Tracklist(ordering)


def unique_permutations(tracks: Sequence[Track]) -> Iterator[Tracklist]:
    """
    Yield orderings of `tracks`, skipping ones equal by title sequence.

    Keeps a set of title sequences already seen, so memory grows with the
    number of distinct orderings emitted.
    """
    seen: Set[Tuple[str, ...]] = set()
    for tracklist in generate_permutations(tracks):
        key = tuple(tracklist.titles())
        if key in seen:
            continue
        seen.add(key)
        yield tracklist


class TracklistPermutations:
    """Restartable iterable over all orderings of a fixed track set."""

    def __init__(self, tracks: Sequence[Track]):
        self._tracks = tuple(tracks)

    def __iter__(self) -> Iterator[Tracklist]:
        return generate_permutations(self._tracks)

    def __len__(self) -> int:
        return math.factorial(len(self._tracks))
