"""
Value and pool dilution calculations.

Value % = (tote odds / fair odds - 1) * 100. Positive means the tote is
paying more than the fair price.
"""
from decimal import Decimal

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")


def value_percent(fair_odds: Decimal, tote_odds: Decimal) -> Decimal:
    """Percentage by which tote odds beat fair odds."""
    if fair_odds <= 0:
        return ZERO
    return (tote_odds / fair_odds - ONE) * HUNDRED


def dilution_factor(pool_net_amount: Decimal, stake: Decimal) -> Decimal:
    """Share of the dividend left after our own stake joins the pool."""
    total = pool_net_amount + stake
    if total <= 0:
        return ONE
    return pool_net_amount / total


def dilution_percent(factor: Decimal) -> Decimal:
    return (ONE - factor) * HUNDRED


def effective_odds(tote_odds: Decimal, factor: Decimal) -> Decimal:
    return tote_odds * factor
