"""Profit/loss analysis for multi-leg options strategies."""

__version__ = '1.0.0'
