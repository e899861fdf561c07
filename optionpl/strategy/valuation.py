"""Profit/loss of option legs and strategies at a given underlying price."""
from typing import Iterable

from .option_leg import OptionLeg


def leg_profit_loss(leg: OptionLeg, price: float) -> float:
    """Calculate the profit/loss of a single leg at expiration.

    Long legs paid the mid price, so the profit is the intrinsic value minus
    that cost. Short legs received it and owe the intrinsic value.

    Args:
        leg: Option leg to value
        price: Underlying price (not validated, negative prices are accepted)

    Returns:
        Profit (positive) or loss (negative) per share
    """
    if leg.is_call():
        intrinsic_value = max(price - leg.strike_price, 0)
    else:
        intrinsic_value = max(leg.strike_price - price, 0)

    if leg.is_long():
        return intrinsic_value - leg.mid_price
    return leg.mid_price - intrinsic_value


def strategy_profit_loss(legs: Iterable[OptionLeg], price: float) -> float:
    """Sum of leg profit/loss over all legs, 0 for an empty strategy."""
    return sum((leg_profit_loss(leg, price) for leg in legs), 0)
