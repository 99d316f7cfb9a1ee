from enum import Enum

from engine.fitting.errors import InvalidFitPolicy


class FitMode(str, Enum):
    """
    Containment policy for a fitted radius or height.

    INSIDE  - largest primitive that fits within the box
    OUTSIDE - smallest primitive that contains the box
    MIDWAY  - halfway between the two
    """

    INSIDE = "inside"
    OUTSIDE = "outside"
    MIDWAY = "midway"


def resolve(mode: FitMode, inside_value: float, outside_value: float) -> float:
    """
    Pick the value to use for the given fit mode.

    :param mode: The fit mode
    :param inside_value: Candidate for FitMode.INSIDE
    :param outside_value: Candidate for FitMode.OUTSIDE
    :return: The selected (or averaged) value
    :rtype: float
    """
    if mode is FitMode.INSIDE:
        return inside_value
    if mode is FitMode.OUTSIDE:
        return outside_value
    if mode is FitMode.MIDWAY:
        return (inside_value + outside_value) / 2
    raise InvalidFitPolicy(f"Unknown fit mode: {mode!r}")


def coerce_fit_mode(value) -> FitMode:
    """Turn a FitMode or its string value into a FitMode."""
    if isinstance(value, FitMode):
        return value
    try:
        return FitMode(str(value).lower())
    except ValueError:
        raise InvalidFitPolicy(f"Unknown fit mode: {value!r}") from None
