"""
Value bet analysis: turns a race snapshot's exacta/trifecta odds into
ranked value bets.

Every pipeline degrades to fewer results on bad data (missing snapshot,
thin pool, malformed keys, zero fair probability). Nothing here raises
for data quality reasons.
"""
import logging
import re
from decimal import Decimal
from typing import List, Optional, Tuple

from config import COMBINATION_SEPARATOR, EXACTA_LEGS, TRIFECTA_LEGS
from models.race import PoolAmounts, RaceSnapshot
from models.settings import ValueBetSettings
from models.value_bet import ExactaValueBet, TrifectaValueBet
from services.fair_odds import fair_exacta_probability, fair_odds, fair_trifecta_probability
from services.value import dilution_factor, dilution_percent, effective_odds, value_percent

logger = logging.getLogger(__name__)

# Runner numbers are small; cap digits so huge keys are rejected, not converted
_RUNNER_NUMBER = re.compile(r'\d{1,9}', re.ASCII)


def parse_combination(key: str, legs: int) -> Optional[Tuple[int, ...]]:
    """Parse "1-2" / "1-2-3" into runner numbers. None if malformed or a runner repeats."""
    parts = [p.strip() for p in key.split(COMBINATION_SEPARATOR)]
    if len(parts) != legs:
        return None
    if not all(_RUNNER_NUMBER.fullmatch(p) for p in parts):
        return None
    runners = tuple(int(p) for p in parts)
    if len(set(runners)) != legs:
        return None
    return runners


def _pool_dilution(pool: PoolAmounts, settings: ValueBetSettings, race_name: str) -> Optional[Decimal]:
    """Dilution factor for the pool, or None when the pool is too thin or our stake moves it too much."""
    if pool.net < settings.minimum_pool_size:
        logger.debug(f"{race_name}: pool {pool.net} below minimum {settings.minimum_pool_size}")
        return None

    factor = dilution_factor(pool.net, settings.default_stake)
    diluted_pct = dilution_percent(factor)
    if diluted_pct > settings.max_dilution_percent:
        logger.debug(f"{race_name}: dilution {diluted_pct:.2f}% above max {settings.max_dilution_percent}%")
        return None
    return factor


def _rank(bets: list, limit: Optional[int] = None) -> list:
    # sorted() is stable, so equal value % keeps feed order
    ranked = sorted(bets, key=lambda b: b.value_percent, reverse=True)
    if limit is not None:
        ranked = ranked[:limit]
    return ranked


def _exacta_bets(snapshot: RaceSnapshot, factor: Decimal,
                 threshold: Optional[Decimal] = None) -> List[ExactaValueBet]:
    bets = []
    for key, tote_odds in snapshot.exacta_odds.items():
        runners = parse_combination(key, EXACTA_LEGS)
        if runners is None:
            logger.debug(f"{snapshot.race_name}: skipping malformed exacta key {key!r}")
            continue
        if tote_odds <= 0:
            continue

        first, second = runners
        fair_prob = fair_exacta_probability(first, second, snapshot.win_odds)
        if fair_prob <= 0:
            continue

        fair = fair_odds(fair_prob)
        value_pct = value_percent(fair, tote_odds)
        if threshold is not None and value_pct < threshold:
            continue

        bets.append(ExactaValueBet(
            first=first,
            second=second,
            first_name=snapshot.runner_name(first),
            second_name=snapshot.runner_name(second),
            tote_odds=tote_odds,
            fair_odds=fair,
            value_percent=value_pct,
            pool_size=snapshot.exacta_pool.net,
            dilution_factor=factor,
            effective_odds=effective_odds(tote_odds, factor),
            race_name=snapshot.race_name,
        ))
    return bets


def _trifecta_bets(snapshot: RaceSnapshot, factor: Decimal,
                   threshold: Optional[Decimal] = None) -> List[TrifectaValueBet]:
    bets = []
    for key, tote_odds in snapshot.trifecta_odds.items():
        runners = parse_combination(key, TRIFECTA_LEGS)
        if runners is None:
            logger.debug(f"{snapshot.race_name}: skipping malformed trifecta key {key!r}")
            continue
        if tote_odds <= 0:
            continue

        first, second, third = runners
        fair_prob = fair_trifecta_probability(first, second, third, snapshot.win_odds)
        if fair_prob <= 0:
            continue

        fair = fair_odds(fair_prob)
        value_pct = value_percent(fair, tote_odds)
        if threshold is not None and value_pct < threshold:
            continue

        bets.append(TrifectaValueBet(
            first=first,
            second=second,
            third=third,
            first_name=snapshot.runner_name(first),
            second_name=snapshot.runner_name(second),
            third_name=snapshot.runner_name(third),
            tote_odds=tote_odds,
            fair_odds=fair,
            value_percent=value_pct,
            pool_size=snapshot.trifecta_pool.net,
            dilution_factor=factor,
            effective_odds=effective_odds(tote_odds, factor),
            race_name=snapshot.race_name,
        ))
    return bets


# =============================================================================
# EXACTA
# =============================================================================

def top_value_bets(snapshot: Optional[RaceSnapshot], settings: ValueBetSettings) -> List[ExactaValueBet]:
    """Top exacta value bets above the threshold, best first, at most top_bet_count."""
    if snapshot is None or not snapshot.has_valid_data:
        return []

    factor = _pool_dilution(snapshot.exacta_pool, settings, snapshot.race_name)
    if factor is None:
        return []

    bets = _exacta_bets(snapshot, factor, threshold=settings.value_threshold_percent)
    ranked = _rank(bets, settings.top_bet_count)
    logger.info(f"{snapshot.race_name}: {len(bets)} exacta value bets >= {settings.value_threshold_percent}%, returning {len(ranked)}")
    return ranked


def all_value_calculations_gated(snapshot: Optional[RaceSnapshot],
                                 settings: ValueBetSettings) -> List[ExactaValueBet]:
    """Every priced exacta combination, subject to the minimum pool and max dilution gates."""
    if snapshot is None or not snapshot.has_valid_data:
        return []

    factor = _pool_dilution(snapshot.exacta_pool, settings, snapshot.race_name)
    if factor is None:
        return []

    ranked = _rank(_exacta_bets(snapshot, factor))
    logger.info(f"{snapshot.race_name}: {len(ranked)} exacta calculations (gated)")
    return ranked


def all_value_calculations_unfiltered(snapshot: Optional[RaceSnapshot],
                                      settings: ValueBetSettings) -> List[ExactaValueBet]:
    """Every priced exacta combination, ignoring pool size and dilution limits."""
    if snapshot is None or not snapshot.has_valid_data:
        return []

    factor = dilution_factor(snapshot.exacta_pool.net, settings.default_stake)
    ranked = _rank(_exacta_bets(snapshot, factor))
    logger.info(f"{snapshot.race_name}: {len(ranked)} exacta calculations (unfiltered)")
    return ranked


# =============================================================================
# TRIFECTA
# =============================================================================

def _has_trifecta_market(snapshot: Optional[RaceSnapshot]) -> bool:
    return snapshot is not None and bool(snapshot.trifecta_odds) and len(snapshot.win_odds) >= 2


def top_trifecta_value_bets(snapshot: Optional[RaceSnapshot],
                            settings: ValueBetSettings) -> List[TrifectaValueBet]:
    """Top trifecta value bets above the threshold, best first, at most top_bet_count."""
    if not _has_trifecta_market(snapshot) or snapshot.trifecta_pool.net <= 0:
        return []

    factor = _pool_dilution(snapshot.trifecta_pool, settings, snapshot.race_name)
    if factor is None:
        return []

    bets = _trifecta_bets(snapshot, factor, threshold=settings.value_threshold_percent)
    ranked = _rank(bets, settings.top_bet_count)
    logger.info(f"{snapshot.race_name}: {len(bets)} trifecta value bets >= {settings.value_threshold_percent}%, returning {len(ranked)}")
    return ranked


def all_trifecta_calculations_gated(snapshot: Optional[RaceSnapshot],
                                    settings: ValueBetSettings) -> List[TrifectaValueBet]:
    """Every priced trifecta combination, subject to the minimum pool and max dilution gates."""
    if not _has_trifecta_market(snapshot) or snapshot.trifecta_pool.net <= 0:
        return []

    factor = _pool_dilution(snapshot.trifecta_pool, settings, snapshot.race_name)
    if factor is None:
        return []

    ranked = _rank(_trifecta_bets(snapshot, factor))
    logger.info(f"{snapshot.race_name}: {len(ranked)} trifecta calculations (gated)")
    return ranked


def all_trifecta_calculations_unfiltered(snapshot: Optional[RaceSnapshot],
                                         settings: ValueBetSettings) -> List[TrifectaValueBet]:
    """Every priced trifecta combination, ignoring pool size and dilution limits."""
    if not _has_trifecta_market(snapshot):
        return []

    factor = dilution_factor(snapshot.trifecta_pool.net, settings.default_stake)
    ranked = _rank(_trifecta_bets(snapshot, factor))
    logger.info(f"{snapshot.race_name}: {len(ranked)} trifecta calculations (unfiltered)")
    return ranked
