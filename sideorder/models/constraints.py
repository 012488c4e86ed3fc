"""
Weighted soft constraints on a tracklist arrangement.

Constraint is a plain union of three frozen dataclasses. Evaluation is a
single dispatch in sideorder.arrangement.scoring.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class AtPosition:
    """Track `title` sits at 0-based `index`."""
    title: str
    index: int
    weight: int = 1


@dataclass(frozen=True)
class Adjacent:
    """Track `first` immediately precedes track `second`."""
    first: str
    second: str
    weight: int = 1


@dataclass(frozen=True)
class OnSameSide:
    """Tracks `first` and `second` land on the same side of the medium."""
    first: str
    second: str
    weight: int = 1


Constraint = Union[AtPosition, Adjacent, OnSameSide]
