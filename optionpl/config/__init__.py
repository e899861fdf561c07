"""Configuration management module."""
from .models import Config, ChartConfig, LoggingConfig
from .config_manager import ConfigManager

__all__ = ['Config', 'ChartConfig', 'LoggingConfig', 'ConfigManager']
