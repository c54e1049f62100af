"""Math utility functions for animations, layout and colours."""

from typing import Tuple, Union

Number = Union[int, float]


def lerp(start: Number, end: Number, t: float) -> float:
    """Linear interpolation between start and end.

    Args:
        start: Starting value
        end: Ending value
        t: Interpolation factor (0.0 to 1.0)

    Returns:
        Interpolated value
    """
    return start + (end - start) * t


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp a value between min and max."""
    return max(min_val, min(max_val, value))


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    """Convert '#rrggbb' or '#rgb' to an RGB tuple.

    Raises:
        ValueError: If the string is not a hex colour
    """
    digits = value.lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) != 6:
        raise ValueError(f"Invalid hex colour: {value}")
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
