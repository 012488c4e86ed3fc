"""
Duration parsing and formatting.

Track lengths are usually written as "m:ss" on sleeves and in tag editors.
"""

import math
from typing import Union


def parse_duration(value: Union[str, int, float]) -> float:
    """
    Parse a duration into seconds.

    Accepts plain numbers of seconds, numeric strings, "m:ss" and "h:mm:ss".

    Args:
        value: Duration as a number or string (e.g. 245, "245.5", "4:05")

    Returns:
        Duration in seconds

    Raises:
        ValueError: If the value is malformed or negative
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid duration: {value!r}")

    if isinstance(value, (int, float)):
        seconds = float(value)
    else:
        parts = [part.strip() for part in value.strip().split(":")]
        if len(parts) > 3 or any(not part or part.startswith("-") for part in parts):
            raise ValueError(f"Invalid duration: {value!r}")
        try:
            numbers = [float(part) for part in parts]
        except ValueError:
            raise ValueError(f"Invalid duration: {value!r}")
        if any(number < 0 for number in numbers) or any(number >= 60 for number in numbers[1:]):
            raise ValueError(f"Invalid duration: {value!r}")
        if not all(math.isfinite(number) for number in numbers):
            raise ValueError(f"Invalid duration: {value!r}")

        seconds = 0.0
        for number in numbers:
            seconds = seconds * 60 + number

    if seconds < 0:
        raise ValueError(f"Duration must be non-negative: {value!r}")
    return seconds


def format_duration(seconds: float) -> str:
    """Format seconds as "m:ss", rounding to the nearest second."""
    total = int(round(seconds))
    minutes, secs = divmod(total, 60)
    return f"{minutes}:{secs:02d}"
