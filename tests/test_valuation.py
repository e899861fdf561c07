"""Unit tests for leg and strategy profit/loss valuation."""
import pytest
from optionpl.strategy.option_leg import OptionLeg, OptionType, PositionType
from optionpl.strategy.valuation import leg_profit_loss, strategy_profit_loss


def make_leg(option_type, position, strike, bid, ask):
    return OptionLeg(type=option_type, position=position, strike_price=strike, bid=bid, ask=ask)


@pytest.fixture
def long_call():
    """Long call, strike 100, mid price 5."""
    return make_leg(OptionType.CALL, PositionType.LONG, 100.0, 4.0, 6.0)


@pytest.fixture
def short_put():
    """Short put, strike 50, mid price 1."""
    return make_leg(OptionType.PUT, PositionType.SHORT, 50.0, 1.0, 1.0)


class TestOptionLeg:
    """Tests for the option leg data model."""

    def test_mid_price(self, long_call):
        """Test that mid price is the average of bid and ask."""
        assert long_call.mid_price == 5.0

    def test_leg_is_immutable(self, long_call):
        """Test that legs cannot be modified after construction."""
        with pytest.raises(AttributeError):
            long_call.strike_price = 105.0

    def test_validate_valid_leg(self, long_call):
        """Test validation of a well-formed leg."""
        assert long_call.validate() == (True, None)

    def test_validate_invalid_legs(self):
        """Test validation messages for malformed legs."""
        cases = [
            (make_leg(OptionType.CALL, PositionType.LONG, 0.0, 1.0, 2.0), "Strike price must be positive"),
            (make_leg(OptionType.CALL, PositionType.LONG, 100.0, -1.0, 2.0), "Bid cannot be negative"),
            (make_leg(OptionType.PUT, PositionType.SHORT, 100.0, 1.0, -2.0), "Ask cannot be negative"),
            (make_leg(OptionType.PUT, PositionType.SHORT, 100.0, 3.0, 2.0), "cannot be greater than ask"),
        ]

        for leg, expected_message in cases:
            is_valid, error_message = leg.validate()
            assert is_valid is False
            assert expected_message in error_message


class TestLegProfitLoss:
    """Tests for single leg profit/loss."""

    def test_long_call_scenario(self, long_call):
        """Test long call below, at and above the strike."""
        assert leg_profit_loss(long_call, 100.0) == -5.0
        assert leg_profit_loss(long_call, 110.0) == 5.0
        assert leg_profit_loss(long_call, 50.0) == -5.0

    def test_long_call_zero_at_break_even(self, long_call):
        """Test that a long call breaks even at strike plus mid price."""
        assert leg_profit_loss(long_call, 105.0) == 0

    def test_long_call_non_decreasing_above_strike(self, long_call):
        """Test that long call profit never falls as price rises above strike."""
        prices = [100.0 + i * 2.5 for i in range(40)]
        profits = [leg_profit_loss(long_call, price) for price in prices]

        assert all(a <= b for a, b in zip(profits, profits[1:]))

    def test_short_put_scenario(self, short_put):
        """Test short put in and out of the money."""
        assert leg_profit_loss(short_put, 40.0) == -9.0
        assert leg_profit_loss(short_put, 49.0) == 0
        assert leg_profit_loss(short_put, 60.0) == 1.0

    def test_long_put(self):
        """Test long put profit below the strike."""
        leg = make_leg(OptionType.PUT, PositionType.LONG, 50.0, 2.0, 2.0)

        assert leg_profit_loss(leg, 40.0) == 8.0
        assert leg_profit_loss(leg, 55.0) == -2.0

    def test_short_call(self):
        """Test short call keeps premium below strike and loses above."""
        leg = make_leg(OptionType.CALL, PositionType.SHORT, 100.0, 2.0, 4.0)

        assert leg_profit_loss(leg, 90.0) == 3.0
        assert leg_profit_loss(leg, 110.0) == -7.0

    def test_long_and_short_are_opposites(self):
        """Test that long and short versions of a leg mirror each other at every price."""
        for option_type in (OptionType.CALL, OptionType.PUT):
            long_leg = make_leg(option_type, PositionType.LONG, 75.0, 2.5, 3.5)
            short_leg = make_leg(option_type, PositionType.SHORT, 75.0, 2.5, 3.5)

            for price in [-10.0, 0.0, 37.5, 72.0, 75.0, 78.0, 150.0]:
                assert leg_profit_loss(long_leg, price) == -leg_profit_loss(short_leg, price)

    def test_negative_price_accepted(self):
        """Test that a negative underlying price is valued, not rejected."""
        leg = make_leg(OptionType.PUT, PositionType.LONG, 10.0, 1.0, 1.0)

        assert leg_profit_loss(leg, -5.0) == 14.0


class TestStrategyProfitLoss:
    """Tests for strategy profit/loss."""

    def test_empty_strategy(self):
        """Test that an empty strategy is worth nothing at any price."""
        for price in [-100.0, 0.0, 50.0, 1e6]:
            assert strategy_profit_loss([], price) == 0

    def test_sum_of_legs(self, long_call, short_put):
        """Test that strategy P/L is the sum of leg P/L."""
        for price in [30.0, 50.0, 100.0, 120.0]:
            expected = leg_profit_loss(long_call, price) + leg_profit_loss(short_put, price)
            assert strategy_profit_loss([long_call, short_put], price) == expected

    def test_bull_call_spread(self, long_call):
        """Test a bull call spread is capped above the short strike."""
        short_call = make_leg(OptionType.CALL, PositionType.SHORT, 110.0, 1.5, 2.5)
        legs = [long_call, short_call]

        assert strategy_profit_loss(legs, 90.0) == -3.0
        assert strategy_profit_loss(legs, 110.0) == 7.0
        assert strategy_profit_loss(legs, 200.0) == 7.0

    def test_accepts_tuple(self, long_call):
        """Test that any iterable of legs is accepted."""
        assert strategy_profit_loss((long_call,), 110.0) == 5.0
