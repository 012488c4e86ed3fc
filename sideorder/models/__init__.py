"""
Value objects for side arrangement.

Contains:
- Track and Tracklist
- Medium and the named medium presets
- Constraint kinds (AtPosition, Adjacent, OnSameSide)
"""

from .track import Track, Tracklist
from .medium import MEDIUM_PRESETS, Medium, get_medium
from .constraints import Adjacent, AtPosition, Constraint, OnSameSide

__all__ = [
    # Tracks
    "Track",
    "Tracklist",
    # Media
    "Medium",
    "MEDIUM_PRESETS",
    "get_medium",
    # Constraints
    "Constraint",
    "AtPosition",
    "Adjacent",
    "OnSameSide",
]
