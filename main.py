#!/usr/bin/env python3
"""
Options Strategy Profit/Loss - Main Entry Point

This script loads a multi-leg options strategy from a JSON file and prints
its profit/loss characteristics: break-even prices, approximate max profit
and max loss, and the sampled price/profit chart.
"""

import sys
import argparse
import json
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from optionpl import __version__
from optionpl.config import Config, ConfigManager
from optionpl.logging import AnalysisLogger
from optionpl.strategy import LegLoader, ProfitLossCalculator

# Load environment variables from .env file
load_dotenv()


DEFAULT_CONFIG_PATH = 'config/config.json'


def load_config(config_path: Optional[str], force_sorted: bool) -> Config:
    """Load the configuration file.

    Defaults apply only when no path was given and the default file is
    absent; an explicit path that does not exist is an error.

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValueError: If config is invalid
        json.JSONDecodeError: If JSON is malformed
    """
    if config_path is None:
        if not Path(DEFAULT_CONFIG_PATH).exists():
            config = Config.default()
            config.sort_break_even = force_sorted
            return config
        config_path = DEFAULT_CONFIG_PATH

    manager = ConfigManager()
    manager.load_config(config_path)
    return Config(
        chart_config=manager.get_chart_config(),
        logging_config=manager.get_logging_config(),
        sort_break_even=manager.get_sort_break_even() or force_sorted
    )


def main(argv=None):
    """Main entry point for the profit/loss calculator."""
    parser = argparse.ArgumentParser(
        description='Profit/loss analysis for multi-leg options strategies'
    )
    parser.add_argument(
        'strategy',
        type=str,
        help='Path to a JSON strategy file with the option legs'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to configuration file (default: config/config.json)'
    )
    parser.add_argument(
        '--sorted',
        action='store_true',
        help='Print break-even points in ascending order'
    )
    parser.add_argument(
        '--price',
        type=float,
        action='append',
        default=[],
        help='Underlying price to value the strategy at (repeatable)'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'Options Strategy P/L v{__version__}'
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, args.sorted)
    except (FileNotFoundError, ValueError, json.JSONDecodeError) as e:
        print(f"Error: {str(e)}")
        return 1

    logger = AnalysisLogger(config.logging_config)
    calculator = ProfitLossCalculator(config)

    try:
        legs = LegLoader().load_legs(args.strategy)
    except (FileNotFoundError, ValueError, json.JSONDecodeError) as e:
        logger.log_error("Failed to load strategy", error=e, context={"strategy": args.strategy})
        return 1

    logger.log_info(f"Loaded {len(legs)} legs", context={"strategy": args.strategy})
    if not legs:
        logger.log_warning("Strategy has no legs, chart data will be empty")

    summary = calculator.summarize(legs)
    logger.log_summary(summary)

    for price in args.price:
        profit = calculator.strategy_profit_loss(legs, price)
        logger.log_info(f"P/L at ${price:.2f}: ${profit:.2f}")

    if summary.chart is not None:
        logger.log_chart(summary.chart)

    return 0


if __name__ == '__main__':
    sys.exit(main())
