"""Option leg data model."""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OptionType(Enum):
    """Option contract type."""
    CALL = "call"
    PUT = "put"


class PositionType(Enum):
    """Whether the contract is held (premium paid) or written (premium received)."""
    LONG = "long"
    SHORT = "short"


@dataclass(frozen=True)
class OptionLeg:
    """One option contract within a strategy."""
    type: OptionType
    position: PositionType
    strike_price: float
    bid: float
    ask: float

    @property
    def mid_price(self) -> float:
        """Average of bid and ask, used as the option's price."""
        return (self.bid + self.ask) / 2

    def is_call(self) -> bool:
        """Whether the leg is a call option."""
        return self.type == OptionType.CALL

    def is_long(self) -> bool:
        """Whether the leg is held rather than written."""
        return self.position == PositionType.LONG

    def validate(self) -> tuple[bool, Optional[str]]:
        """Validate option leg values.

        Returns:
            Tuple of (is_valid, error_message)
        """
        for name, value in (('Strike price', self.strike_price), ('Bid', self.bid), ('Ask', self.ask)):
            if not math.isfinite(value):
                return False, f"{name} must be a finite number"
        if self.strike_price <= 0:
            return False, "Strike price must be positive"
        if self.bid < 0:
            return False, "Bid cannot be negative"
        if self.ask < 0:
            return False, "Ask cannot be negative"
        if self.bid > self.ask:
            return False, f"Bid ${self.bid} cannot be greater than ask ${self.ask}"
        return True, None
