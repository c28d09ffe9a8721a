"""
Fair odds from the WIN market: implied probabilities and Harville
conditional probabilities for ordered-finish pools (exacta, trifecta).

Zero means "no fair estimate" throughout; nothing here raises on bad data.
"""
from decimal import Decimal
from typing import Dict, Mapping

from config import SYNTHETIC_ODDS_BASE, SYNTHETIC_ODDS_STEP

ZERO = Decimal("0")
ONE = Decimal("1")


def implied_win_probability(odds: Decimal) -> Decimal:
    """Convert decimal WIN odds to implied probability."""
    if odds <= 0:
        return ZERO
    return ONE / odds


def fair_exacta_probability(first: int, second: int, win_odds: Mapping[int, Decimal]) -> Decimal:
    """P(first wins) * P(second wins | first already home) = P1 * P2 / (1 - P1)."""
    if first not in win_odds or second not in win_odds:
        return ZERO

    o_first = win_odds[first]
    o_second = win_odds[second]
    if o_first <= 0 or o_second <= 0:
        return ZERO

    p_first = implied_win_probability(o_first)
    p_second = implied_win_probability(o_second)

    p_first_not_wins = ONE - p_first
    if p_first_not_wins <= 0:
        return ZERO

    return p_first * p_second / p_first_not_wins


def fair_trifecta_probability(first: int, second: int, third: int,
                              win_odds: Mapping[int, Decimal]) -> Decimal:
    """P1 * [P2 / (1 - P1)] * [P3 / (1 - P1 - P2)]."""
    if first not in win_odds or second not in win_odds or third not in win_odds:
        return ZERO

    o_first = win_odds[first]
    o_second = win_odds[second]
    o_third = win_odds[third]
    if o_first <= 0 or o_second <= 0 or o_third <= 0:
        return ZERO

    p_first = implied_win_probability(o_first)
    p_second = implied_win_probability(o_second)
    p_third = implied_win_probability(o_third)

    p_first_not_wins = ONE - p_first
    if p_first_not_wins <= 0:
        return ZERO

    p_neither_wins = ONE - p_first - p_second
    if p_neither_wins <= 0:
        return ZERO

    return p_first * (p_second / p_first_not_wins) * (p_third / p_neither_wins)


def fair_odds(probability: Decimal) -> Decimal:
    """Convert probability to fair decimal odds."""
    if probability <= 0:
        return ZERO
    return ONE / probability


def synthetic_win_odds(runner_count: int) -> Dict[int, Decimal]:
    """Placeholder WIN odds (2 + 1.5 * n) for races whose feed has no WIN market."""
    return {
        i: SYNTHETIC_ODDS_BASE + SYNTHETIC_ODDS_STEP * i
        for i in range(1, runner_count + 1)
    }
