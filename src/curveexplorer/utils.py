import math
import numbers


def round_half_up(value: float) -> float:
    """Round to the nearest integer, halves towards +infinity (like `Math.round`)."""
    return float(math.floor(value + 0.5))


def is_finite_number(value: object) -> bool:
    """True for real numbers (not bools) that are neither NaN nor infinite."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def wordify(phrase: str) -> str:
    """Turn a display name into a widget id, e.g. 'Play animations' -> 'play-animations'."""
    return "-".join(phrase.split(" ")).lower()
