"""Approximate maximum profit and maximum loss of a strategy.

Both bounds look at each leg in isolation against a fixed reference price
(the strike standing in for the largest intrinsic value) and start from 0,
so max profit is never below 0 and max loss is never above 0.
"""
from typing import Iterable

from .option_leg import OptionLeg, OptionType


def max_profit(legs: Iterable[OptionLeg]) -> float:
    """Largest single-leg profit estimate, at least 0."""
    result = 0
    for leg in legs:
        reference = leg.strike_price if leg.type == OptionType.CALL else 0
        if leg.is_long():
            profit = reference - leg.mid_price
        else:
            profit = leg.mid_price - reference
        result = max(result, profit)
    return result


def max_loss(legs: Iterable[OptionLeg]) -> float:
    """Smallest single-leg loss estimate, at most 0."""
    result = 0
    for leg in legs:
        reference = leg.strike_price if leg.type == OptionType.PUT else 0
        if leg.is_long():
            loss = leg.mid_price - reference
        else:
            loss = reference - leg.mid_price
        result = min(result, loss)
    return result
