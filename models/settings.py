"""User-configurable settings for value bet filtering and dilution calculations."""
from dataclasses import dataclass, field
from decimal import Decimal

import config
from models.race import to_decimal


class InvalidConfiguration(ValueError):
    """Settings that would make the analysis meaningless."""


@dataclass(frozen=True)
class ValueBetSettings:
    value_threshold_percent: Decimal = field(default_factory=lambda: config.VALUE_THRESHOLD_PERCENT)
    minimum_pool_size: Decimal = field(default_factory=lambda: config.MINIMUM_POOL_SIZE)
    max_dilution_percent: Decimal = field(default_factory=lambda: config.MAX_DILUTION_PERCENT)
    default_stake: Decimal = field(default_factory=lambda: config.DEFAULT_STAKE_FOR_DILUTION)
    top_bet_count: int = field(default_factory=lambda: config.TOP_BET_COUNT)
    odds_type: str = field(default_factory=lambda: config.ODDS_TYPE)

    def __post_init__(self):
        for name in ('value_threshold_percent', 'minimum_pool_size', 'max_dilution_percent', 'default_stake'):
            value = getattr(self, name)
            try:
                value = to_decimal(value)
            except ArithmeticError:
                raise InvalidConfiguration(f"{name} must be a number, got {value!r}")
            if not value.is_finite():
                raise InvalidConfiguration(f"{name} must be finite, got {value}")
            if value < 0:
                raise InvalidConfiguration(f"{name} must not be negative, got {value}")
            object.__setattr__(self, name, value)

        if self.max_dilution_percent > 100:
            raise InvalidConfiguration(
                f"max_dilution_percent must be at most 100, got {self.max_dilution_percent}")

        if isinstance(self.top_bet_count, bool) or not isinstance(self.top_bet_count, int):
            raise InvalidConfiguration(f"top_bet_count must be an integer, got {self.top_bet_count!r}")
        if self.top_bet_count < 0:
            raise InvalidConfiguration(f"top_bet_count must not be negative, got {self.top_bet_count}")

        if self.odds_type not in config.ODDS_TYPES:
            raise InvalidConfiguration(
                f"odds_type must be one of {', '.join(config.ODDS_TYPES)}, got {self.odds_type!r}")
