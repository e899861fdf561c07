"""Strategy profit/loss calculation module."""
from .option_leg import OptionLeg, OptionType, PositionType
from .valuation import leg_profit_loss, strategy_profit_loss
from .break_even import break_even_points
from .bounds import max_profit, max_loss
from .chart import ChartData, chart_data, strike_median
from .profit_loss_calculator import ProfitLossCalculator, StrategySummary
from .leg_loader import LegLoader

__all__ = [
    'OptionLeg', 'OptionType', 'PositionType',
    'leg_profit_loss', 'strategy_profit_loss',
    'break_even_points',
    'max_profit', 'max_loss',
    'ChartData', 'chart_data', 'strike_median',
    'ProfitLossCalculator', 'StrategySummary',
    'LegLoader',
]
