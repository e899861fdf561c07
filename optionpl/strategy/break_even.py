"""Per-leg break-even prices."""
from typing import Iterable, List

from .option_leg import OptionLeg


def leg_break_even(leg: OptionLeg) -> float:
    """Underlying price at which the leg's intrinsic value equals its mid price."""
    if leg.is_call():
        if leg.is_long():
            return leg.strike_price + leg.mid_price
        return leg.strike_price - leg.mid_price
    if leg.is_long():
        return leg.strike_price - leg.mid_price
    return leg.strike_price + leg.mid_price


def break_even_points(legs: Iterable[OptionLeg], sort: bool = False) -> List[float]:
    """Calculate one break-even price per leg.

    Each leg is evaluated on its own, so for spreads and straddles the values
    are an approximation, not roots of the combined payoff curve.

    Args:
        legs: Strategy legs
        sort: Return the points ascending instead of in leg order

    Returns:
        List of break-even prices, duplicates retained
    """
    points = [leg_break_even(leg) for leg in legs]
    if sort:
        points.sort()
    return points
