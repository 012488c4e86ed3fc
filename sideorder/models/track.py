"""
Track and tracklist value objects.

A Tracklist is compared, hashed and sorted on its title sequence only.
Durations are floats, which have no reliable equality, so two arrangements
are the same arrangement when their titles come in the same order.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable, Iterator, List, Sequence, Tuple


@dataclass(frozen=True)
class Track:
    """A titled item with a duration in seconds."""
    title: str
    duration: float


@total_ordering
@dataclass(frozen=True, init=False, repr=False, eq=False)
class Tracklist:
    """An ordered, immutable sequence of tracks."""
    tracks: Tuple[Track, ...]

    def __init__(self, tracks: Iterable[Track] = ()):
        object.__setattr__(self, "tracks", tuple(tracks))

    @classmethod
    def from_pairs(
        cls,
        titles: Sequence[str],
        durations: Sequence[float]
    ) -> "Tracklist":
        """
        Build a tracklist from parallel title and duration data.

        Args:
            titles: Track titles in arrangement order
            durations: Duration in seconds for each title

        Returns:
            Tracklist with one track per title

        Raises:
            ValueError: If the two sequences differ in length
        """
        if len(titles) != len(durations):
            raise ValueError(
                f"Got {len(titles)} titles but {len(durations)} durations"
            )
        return cls(Track(title, duration) for title, duration in zip(titles, durations))

    def titles(self) -> List[str]:
        return [track.title for track in self.tracks]

    def duration(self) -> float:
        """Total duration of all tracks in seconds."""
        return sum(track.duration for track in self.tracks)

    def index_of(self, title: str) -> int:
        """Position of the first track with this title, or -1 if absent."""
        for position, track in enumerate(self.tracks):
            if track.title == title:
                return position
        return -1

    def __len__(self) -> int:
        return len(self.tracks)

    def __iter__(self) -> Iterator[Track]:
        return iter(self.tracks)

    def __getitem__(self, index: int) -> Track:
        return self.tracks[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tracklist):
            return NotImplemented
        return self.titles() == other.titles()

    def __lt__(self, other: "Tracklist") -> bool:
        if not isinstance(other, Tracklist):
            return NotImplemented
        return self.titles() < other.titles()

    def __hash__(self) -> int:
        return hash(tuple(self.titles()))

    def __repr__(self) -> str:
        return f"Tracklist({self.titles()!r})"
