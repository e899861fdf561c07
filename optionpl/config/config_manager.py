"""Configuration manager for loading and validating configuration."""
import json
import os
import re
from .models import Config, ChartConfig, LoggingConfig


class ConfigManager:
    """Manages loading and validation of configuration."""

    def __init__(self):
        """Initialize the ConfigManager."""
        self._config: Config = None

    def load_config(self, config_path: str) -> Config:
        """Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded configuration

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
            json.JSONDecodeError: If JSON is malformed
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(
                f"Configuration file not found: {config_path}\n"
                f"Please create a configuration file at this location."
            )

        try:
            with open(config_path, 'r') as f:
                config_data = json.load(f)
        except json.JSONDecodeError as e:
            raise json.JSONDecodeError(
                f"Invalid JSON format in configuration file: {e.msg}",
                e.doc,
                e.pos
            )

        config_data = self._substitute_env_vars(config_data)

        chart_data = config_data.get('chart', {})
        logging_data = config_data.get('logging', {})

        try:
            config = Config(
                chart_config=ChartConfig(
                    range_fraction=float(chart_data.get('range_fraction', 0.5)),
                    step_count=int(chart_data.get('step_count', 10))
                ),
                logging_config=LoggingConfig(
                    level=logging_data.get('level', 'INFO'),
                    file_path=logging_data.get('file_path', 'logs/optionpl.log')
                ),
                sort_break_even=self._parse_bool(config_data.get('sort_break_even', False))
            )
        except (ValueError, TypeError) as e:
            raise ValueError(
                f"Invalid configuration value type: {e}\n"
                f"Please check that numeric values are numbers and other values are correct types."
            )

        if not self.validate_config(config):
            raise ValueError("Configuration validation failed")

        self._config = config
        return config

    def _parse_bool(self, value) -> bool:
        """Convert a JSON boolean or an environment-substituted string to bool."""
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ('true', 'false'):
            return value.strip().lower() == 'true'
        raise ValueError(f"Expected true or false, got {value!r}")

    def _substitute_env_vars(self, data):
        """Recursively substitute environment variables in configuration data.

        Environment variables should be in the format ${VAR_NAME}.

        Args:
            data: Configuration data (dict, list, or string)

        Returns:
            Data with environment variables substituted
        """
        if isinstance(data, dict):
            return {key: self._substitute_env_vars(value) for key, value in data.items()}
        elif isinstance(data, list):
            return [self._substitute_env_vars(item) for item in data]
        elif isinstance(data, str):
            pattern = r'\$\{([^}]+)\}'
            matches = re.findall(pattern, data)
            result = data
            for var_name in matches:
                env_value = os.environ.get(var_name, '')
                result = result.replace(f'${{{var_name}}}', env_value)
            return result
        else:
            return data

    def validate_config(self, config: Config) -> bool:
        """Validate the configuration.

        Args:
            config: Config object to validate

        Returns:
            True if valid

        Raises:
            ValueError: If validation fails with error message
        """
        is_valid, error_message = config.validate()
        if not is_valid:
            raise ValueError(f"Configuration validation error: {error_message}")
        return True

    def get_chart_config(self) -> ChartConfig:
        """Get chart sampling configuration.

        Returns:
            ChartConfig object
        """
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load_config first.")
        return self._config.chart_config

    def get_sort_break_even(self) -> bool:
        """Get whether break-even points are returned in ascending order."""
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load_config first.")
        return self._config.sort_break_even

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration.

        Returns:
            LoggingConfig object
        """
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load_config first.")
        return self._config.logging_config
