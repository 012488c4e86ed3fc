"""
Physical media with a fixed number of sides and a per-side capacity.

Preset capacities are common practical limits, not hard format maximums:
a 12" LP cut at 33 1/3 RPM keeps good level and bass up to roughly
22 minutes per side, a C90 cassette holds 45 minutes per side.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Medium:
    """A container with `sides` sides of `max_duration_per_side` seconds each."""
    sides: int
    max_duration_per_side: float

    def capacity(self) -> float:
        """Total playing time across all sides in seconds."""
        return self.sides * self.max_duration_per_side


MEDIUM_PRESETS: Dict[str, Medium] = {
    # Vinyl
    "single_7": Medium(sides=2, max_duration_per_side=5 * 60),
    "single_12": Medium(sides=2, max_duration_per_side=12 * 60),
    "ep_12": Medium(sides=2, max_duration_per_side=15 * 60),
    "lp": Medium(sides=2, max_duration_per_side=22 * 60),
    "double_lp": Medium(sides=4, max_duration_per_side=22 * 60),
    "triple_lp": Medium(sides=6, max_duration_per_side=22 * 60),
    # Cassette
    "c46": Medium(sides=2, max_duration_per_side=23 * 60),
    "c60": Medium(sides=2, max_duration_per_side=30 * 60),
    "c90": Medium(sides=2, max_duration_per_side=45 * 60),
    "c120": Medium(sides=2, max_duration_per_side=60 * 60),
}


def get_medium(name: str) -> Medium:
    """
    Look up a preset medium by name.

    Args:
        name: Preset name, case-insensitive (e.g. "lp", "C90")

    Returns:
        The preset Medium

    Raises:
        ValueError: If no preset has that name
    """
    key = name.strip().lower()
    if key not in MEDIUM_PRESETS:
        known = ", ".join(sorted(MEDIUM_PRESETS))
        raise ValueError(f"Unknown medium preset: {name!r} (known: {known})")
    return MEDIUM_PRESETS[key]
