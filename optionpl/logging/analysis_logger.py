"""Analysis logger with structured context and rotating file output."""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from optionpl.config.models import LoggingConfig


class AnalysisLogger:
    """Logger for strategy analysis runs."""

    def __init__(self, config: LoggingConfig):
        """Initialize the analysis logger.

        Args:
            config: Logging configuration
        """
        self.config = config
        self.logger = logging.getLogger('OptionPL')
        self.logger.setLevel(getattr(logging, config.level.upper()))

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        formatter = logging.Formatter(
            '[%(asctime)s] [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            config.file_path,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5
        )
        file_handler.setLevel(getattr(logging, config.level.upper()))
        file_handler.setFormatter(formatter)
        self.logger.addHandler(file_handler)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, config.level.upper()))
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

    def _format_context(self, context: Optional[Dict[str, Any]]) -> str:
        """Format context dictionary for logging.

        Args:
            context: Context dictionary

        Returns:
            Formatted context string
        """
        if not context:
            return ""
        return " | " + " | ".join(f"{key}={value}" for key, value in context.items())

    def log_info(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Log an info message.

        Args:
            message: Log message
            context: Optional context dictionary for structured data
        """
        self.logger.info(f"{message}{self._format_context(context)}")

    def log_warning(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Log a warning message.

        Args:
            message: Log message
            context: Optional context dictionary for structured data
        """
        self.logger.warning(f"{message}{self._format_context(context)}")

    def log_error(self, message: str, error: Optional[Exception] = None,
                  context: Optional[Dict[str, Any]] = None):
        """Log an error message.

        Args:
            message: Log message
            error: Optional exception object
            context: Optional context dictionary for structured data
        """
        context_str = self._format_context(context)

        if error:
            error_info = f" | Error: {type(error).__name__}: {str(error)}"
            self.logger.error(f"{message}{context_str}{error_info}", exc_info=True)
        else:
            self.logger.error(f"{message}{context_str}")

    def log_debug(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Log a debug message.

        Args:
            message: Log message
            context: Optional context dictionary for structured data
        """
        self.logger.debug(f"{message}{self._format_context(context)}")

    def log_summary(self, summary):
        """Log strategy summary details.

        Args:
            summary: StrategySummary produced by ProfitLossCalculator.summarize
        """
        break_evens = ", ".join(f"${point:.2f}" for point in summary.break_even_points) or "N/A"
        message = (
            f"Strategy analyzed | "
            f"Legs={summary.leg_count} | "
            f"Net Premium=${summary.net_premium:.2f} | "
            f"Max Profit=${summary.max_profit:.2f} | "
            f"Max Loss=${summary.max_loss:.2f} | "
            f"Break-even={break_evens}"
        )
        self.log_info(message)

    def log_chart(self, chart):
        """Log every sampled point of a chart.

        Args:
            chart: ChartData with index-aligned prices and profits
        """
        self.log_info(f"Chart data for {len(chart.prices)} prices:")
        for price, profit in chart.points():
            self.log_info(f"  Price=${price:.2f} | P/L=${profit:.2f}")
