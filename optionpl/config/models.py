"""Data models for configuration."""
import math
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ChartConfig:
    """Sampling settings for the price/profit chart."""
    range_fraction: float = 0.5  # Fraction of the median strike below/above the median
    step_count: int = 10  # Number of steps across the sampled window

    def validate(self) -> tuple[bool, Optional[str]]:
        """Validate chart configuration.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not math.isfinite(self.range_fraction):
            return False, "Chart range fraction must be a finite number"
        if self.range_fraction <= 0:
            return False, "Chart range fraction must be positive"
        if not isinstance(self.step_count, int):
            return False, "Chart step count must be an integer"
        if self.step_count <= 0:
            return False, "Chart step count must be positive"
        return True, None


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str
    file_path: str

    def validate(self) -> tuple[bool, Optional[str]]:
        """Validate logging configuration.

        Returns:
            Tuple of (is_valid, error_message)
        """
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if self.level.upper() not in valid_levels:
            return False, f"Log level must be one of {valid_levels}"
        if not self.file_path or not self.file_path.strip():
            return False, "Log file path is required"
        return True, None


@dataclass
class Config:
    """Main configuration for the profit/loss calculator."""
    chart_config: ChartConfig = field(default_factory=ChartConfig)
    logging_config: LoggingConfig = field(
        default_factory=lambda: LoggingConfig(level='INFO', file_path='logs/optionpl.log')
    )
    sort_break_even: bool = False  # Break-even points ascending instead of in leg order

    @classmethod
    def default(cls) -> 'Config':
        """Build a configuration with every default applied."""
        return cls()

    def validate(self) -> tuple[bool, Optional[str]]:
        """Validate the entire configuration.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not isinstance(self.sort_break_even, bool):
            return False, "sort_break_even must be true or false"

        is_valid, error = self.chart_config.validate()
        if not is_valid:
            return False, f"Chart config error: {error}"

        is_valid, error = self.logging_config.validate()
        if not is_valid:
            return False, f"Logging config error: {error}"

        return True, None
