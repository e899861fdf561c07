"""Sampled price/profit curve for charting a strategy."""
import math
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from .option_leg import OptionLeg
from .valuation import strategy_profit_loss

# Sampling window: median strike * fraction on either side, split into steps
PRICE_RANGE_FRACTION = 0.5
PRICE_STEP_COUNT = 10


@dataclass
class ChartData:
    """Index-aligned prices and strategy profits (profits[i] is the P/L at prices[i])."""
    prices: List[float] = field(default_factory=list)
    profits: List[float] = field(default_factory=list)

    def points(self) -> List[Tuple[float, float]]:
        """Prices paired with their profits."""
        return list(zip(self.prices, self.profits))

    def to_dict(self) -> Dict[str, List[float]]:
        """Plain dictionary form for a charting layer."""
        return {"prices": list(self.prices), "profits": list(self.profits)}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going toward +infinity.

    Python's round() rounds halves to even, which would shift the sampling
    window (round(2.5) == 2 but the window start must be 3).
    """
    return math.floor(value + 0.5)


def strike_median(legs: Sequence[OptionLeg]) -> float:
    """Return the strike at index n // 2 of the sorted strikes.

    This is the true median for an odd number of legs and the upper median
    for an even number.

    Raises:
        ValueError: If the strategy has no legs
    """
    if not legs:
        raise ValueError("No option legs provided")

    strikes = sorted(leg.strike_price for leg in legs)
    return strikes[len(strikes) // 2]


def chart_data(
    legs: Sequence[OptionLeg],
    range_fraction: float = PRICE_RANGE_FRACTION,
    step_count: int = PRICE_STEP_COUNT,
) -> ChartData:
    """Sample the strategy profit/loss around the median strike.

    The window runs from round(median * range_fraction) to
    round(median + start) inclusive, in steps of
    round((end - start) / step_count). All rounding is half-up.

    A step that rounds to zero (or below, for a non-positive median) would
    never advance, so in that case only the start price is sampled.

    Args:
        legs: Strategy legs, at least one
        range_fraction: Fraction of the median strike used for the window
        step_count: Number of steps the window is divided into

    Returns:
        ChartData with equally long prices and profits

    Raises:
        ValueError: If the strategy has no legs
    """
    median = strike_median(legs)
    start = round_half_up(median * range_fraction)
    end = round_half_up(median + start)
    step = round_half_up((end - start) / step_count)

    chart = ChartData()
    if step <= 0:
        chart.prices.append(start)
        chart.profits.append(strategy_profit_loss(legs, start))
        return chart

    for price in range(start, end + 1, step):
        chart.prices.append(price)
        chart.profits.append(strategy_profit_loss(legs, price))
    return chart
