"""Profit/loss calculator for multi-leg options strategies."""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from optionpl.config.models import Config
from .bounds import max_loss, max_profit
from .break_even import break_even_points
from .chart import ChartData, chart_data, strike_median
from .option_leg import OptionLeg
from .valuation import leg_profit_loss, strategy_profit_loss


@dataclass
class StrategySummary:
    """Profit/loss characteristics of a strategy."""
    leg_count: int
    net_premium: float  # Received minus paid mid prices
    max_profit: float
    max_loss: float
    break_even_points: List[float] = field(default_factory=list)
    chart: Optional[ChartData] = None  # None when the strategy has no legs


class ProfitLossCalculator:
    """Calculator for strategy profit/loss using configured sampling and ordering."""

    def __init__(self, config: Config):
        """Initialize the ProfitLossCalculator.

        Args:
            config: Configuration object with chart and break-even settings
        """
        self._config = config

    def leg_profit_loss(self, leg: OptionLeg, price: float) -> float:
        """Profit/loss of a single leg at the given underlying price."""
        return leg_profit_loss(leg, price)

    def strategy_profit_loss(self, legs: Sequence[OptionLeg], price: float) -> float:
        """Total profit/loss of the strategy at the given underlying price."""
        return strategy_profit_loss(legs, price)

    def break_even_points(self, legs: Sequence[OptionLeg]) -> List[float]:
        """Per-leg break-even prices, ascending if the config asks for it."""
        return break_even_points(legs, sort=self._config.sort_break_even)

    def max_profit(self, legs: Sequence[OptionLeg]) -> float:
        """Approximate maximum profit, at least 0."""
        return max_profit(legs)

    def max_loss(self, legs: Sequence[OptionLeg]) -> float:
        """Approximate maximum loss, at most 0."""
        return max_loss(legs)

    def strike_median(self, legs: Sequence[OptionLeg]) -> float:
        """Median strike of the strategy legs.

        Raises:
            ValueError: If the strategy has no legs
        """
        return strike_median(legs)

    def chart_data(self, legs: Sequence[OptionLeg]) -> ChartData:
        """Sample the strategy curve with the configured window and step count.

        Raises:
            ValueError: If the strategy has no legs
        """
        chart_config = self._config.chart_config
        return chart_data(
            legs,
            range_fraction=chart_config.range_fraction,
            step_count=chart_config.step_count,
        )

    def net_premium(self, legs: Sequence[OptionLeg]) -> float:
        """Premium received for short legs minus premium paid for long legs."""
        return sum(
            (-leg.mid_price if leg.is_long() else leg.mid_price for leg in legs),
            0
        )

    def summarize(self, legs: Sequence[OptionLeg]) -> StrategySummary:
        """Collect all profit/loss characteristics of a strategy.

        An empty strategy is summarized without a chart instead of failing.

        Args:
            legs: Strategy legs

        Returns:
            StrategySummary for the strategy
        """
        return StrategySummary(
            leg_count=len(legs),
            net_premium=self.net_premium(legs),
            max_profit=self.max_profit(legs),
            max_loss=self.max_loss(legs),
            break_even_points=self.break_even_points(legs),
            chart=self.chart_data(legs) if legs else None,
        )
