"""
Race snapshot: WIN/EXACTA/TRIFECTA odds and pool figures for one race.
Built once per fetch; a refresh produces a new snapshot.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from config import CURRENCY_SYMBOL


def to_decimal(value) -> Decimal:
    """Coerce odds/amounts to Decimal without going through binary float noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class PoolAmounts:
    """Monetary figures for one tote pool."""
    gross: Decimal = Decimal("0")
    net: Decimal = Decimal("0")
    carry_in: Decimal = Decimal("0")
    guarantee: Decimal = Decimal("0")
    top_up: Decimal = Decimal("0")

    def __post_init__(self):
        for name in ('gross', 'net', 'carry_in', 'guarantee', 'top_up'):
            object.__setattr__(self, name, to_decimal(getattr(self, name)))


@dataclass(frozen=True)
class AvailableRace:
    """A race offered for analysis: lookup name, display name, country."""
    base_name: str
    display_name: str
    country_code: str = ''


@dataclass(frozen=True)
class RaceSnapshot:
    """
    Immutable odds/pool snapshot for a race.

    win_odds:      runner number -> decimal WIN odds
    runner_names:  runner number -> horse name (may be sparse)
    exacta_odds:   "first-second" -> decimal tote odds
    trifecta_odds: "first-second-third" -> decimal tote odds
    """
    race_name: str
    event_id: str = ''
    win_odds: Mapping[int, Decimal] = field(default_factory=dict)
    runner_names: Mapping[int, str] = field(default_factory=dict)
    exacta_odds: Mapping[str, Decimal] = field(default_factory=dict)
    trifecta_odds: Mapping[str, Decimal] = field(default_factory=dict)
    win_pool: PoolAmounts = field(default_factory=PoolAmounts)
    exacta_pool: PoolAmounts = field(default_factory=PoolAmounts)
    trifecta_pool: PoolAmounts = field(default_factory=PoolAmounts)

    def __post_init__(self):
        # Copy and freeze so callers can't mutate the snapshot behind the engine
        object.__setattr__(self, 'win_odds', MappingProxyType(
            {int(k): to_decimal(v) for k, v in self.win_odds.items()}))
        object.__setattr__(self, 'runner_names', MappingProxyType(
            {int(k): str(v) for k, v in self.runner_names.items()}))
        object.__setattr__(self, 'exacta_odds', MappingProxyType(
            {str(k): to_decimal(v) for k, v in self.exacta_odds.items()}))
        object.__setattr__(self, 'trifecta_odds', MappingProxyType(
            {str(k): to_decimal(v) for k, v in self.trifecta_odds.items()}))

    @property
    def has_valid_data(self) -> bool:
        """Enough data for EXACTA or TRIFECTA value analysis."""
        if len(self.win_odds) < 2:
            return False
        has_exacta = len(self.exacta_odds) > 0 and self.exacta_pool.net > 0
        has_trifecta = len(self.trifecta_odds) > 0 and self.trifecta_pool.net > 0
        return has_exacta or has_trifecta

    def runner_name(self, number: int) -> str:
        """Horse name for a runner number, or "#<number>" when the feed omitted it."""
        return self.runner_names.get(number, f"#{number}")

    def pool_summary(self) -> str:
        ex = self.exacta_pool
        c = CURRENCY_SYMBOL
        summary = (
            f"Exacta Pool {c}{ex.net:,.0f}  Carry-in {c}{ex.carry_in:,.0f}  "
            f"Guarantee {c}{ex.guarantee:,.0f}  Top-up {c}{ex.top_up:,.0f}"
        )
        tri = self.trifecta_pool
        if tri.net > 0:
            summary += f"  Trifecta Pool {c}{tri.net:,.0f}  Trif. Carry-in {c}{tri.carry_in:,.0f}"
        return summary
