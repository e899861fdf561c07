"""Loader that builds validated option legs from a JSON strategy file."""
import json
import os
from typing import Any, Dict, List

from .option_leg import OptionLeg, OptionType, PositionType


class LegLoader:
    """Loads and validates strategy legs.

    The strategy file holds either a list of leg objects or an object with a
    "legs" list:

        {"legs": [{"type": "call", "position": "long",
                   "strike_price": 100, "bid": 4, "ask": 6}]}
    """

    REQUIRED_FIELDS = ('type', 'position', 'strike_price', 'bid', 'ask')

    def load_legs(self, strategy_path: str) -> List[OptionLeg]:
        """Load strategy legs from a JSON file.

        Args:
            strategy_path: Path to the strategy file

        Returns:
            List of validated OptionLeg objects in file order

        Raises:
            FileNotFoundError: If the strategy file doesn't exist
            ValueError: If a leg is malformed or fails validation
            json.JSONDecodeError: If JSON is malformed
        """
        if not os.path.exists(strategy_path):
            raise FileNotFoundError(f"Strategy file not found: {strategy_path}")

        try:
            with open(strategy_path, 'r') as f:
                strategy_data = json.load(f)
        except json.JSONDecodeError as e:
            raise json.JSONDecodeError(
                f"Invalid JSON format in strategy file: {e.msg}",
                e.doc,
                e.pos
            )

        return self.parse_legs(strategy_data)

    def parse_legs(self, strategy_data: Any) -> List[OptionLeg]:
        """Build legs from already decoded strategy data.

        Raises:
            ValueError: If the data or any leg is invalid
        """
        if isinstance(strategy_data, dict):
            strategy_data = strategy_data.get('legs', [])
        if not isinstance(strategy_data, list):
            raise ValueError("Strategy must be a list of legs or an object with a 'legs' list")

        legs = []
        for index, leg_data in enumerate(strategy_data):
            try:
                leg = self.parse_leg(leg_data)
            except (ValueError, TypeError, KeyError) as e:
                raise ValueError(f"Invalid option leg at index {index}: {e}")

            is_valid, error_message = leg.validate()
            if not is_valid:
                raise ValueError(f"Option leg validation error at index {index}: {error_message}")
            legs.append(leg)

        return legs

    def parse_leg(self, leg_data: Dict[str, Any]) -> OptionLeg:
        """Build a single leg from a dictionary.

        Type and position are case-insensitive; numeric fields accept
        numbers or numeric strings.

        Raises:
            ValueError: If a field is missing or has an invalid value
        """
        if not isinstance(leg_data, dict):
            raise ValueError("Leg must be an object")

        missing = [name for name in self.REQUIRED_FIELDS if name not in leg_data]
        if missing:
            raise ValueError(f"Missing required fields: {', '.join(missing)}")

        return OptionLeg(
            type=OptionType(str(leg_data['type']).strip().lower()),
            position=PositionType(str(leg_data['position']).strip().lower()),
            strike_price=float(leg_data['strike_price']),
            bid=float(leg_data['bid']),
            ask=float(leg_data['ask'])
        )
