"""Pydantic models for request/response."""
from decimal import Decimal
from typing import Dict, List

from pydantic import BaseModel, Field

import config
from models.race import PoolAmounts, RaceSnapshot


class PoolIn(BaseModel):
    gross: Decimal = Field(default=Decimal("0"), ge=0)
    net: Decimal = Field(default=Decimal("0"), ge=0)
    carry_in: Decimal = Field(default=Decimal("0"), ge=0)
    guarantee: Decimal = Field(default=Decimal("0"), ge=0)
    top_up: Decimal = Field(default=Decimal("0"), ge=0)

    def to_pool(self) -> PoolAmounts:
        return PoolAmounts(**self.model_dump())


class RaceSnapshotIn(BaseModel):
    race_name: str
    event_id: str = ''
    win_odds: Dict[int, Decimal] = {}
    runner_names: Dict[int, str] = {}
    exacta_odds: Dict[str, Decimal] = {}
    trifecta_odds: Dict[str, Decimal] = {}
    win_pool: PoolIn = PoolIn()
    exacta_pool: PoolIn = PoolIn()
    trifecta_pool: PoolIn = PoolIn()

    def to_snapshot(self) -> RaceSnapshot:
        return RaceSnapshot(
            race_name=self.race_name,
            event_id=self.event_id,
            win_odds=self.win_odds,
            runner_names=self.runner_names,
            exacta_odds=self.exacta_odds,
            trifecta_odds=self.trifecta_odds,
            win_pool=self.win_pool.to_pool(),
            exacta_pool=self.exacta_pool.to_pool(),
            trifecta_pool=self.trifecta_pool.to_pool(),
        )


class SettingsIn(BaseModel):
    # Range checks live in ValueBetSettings so API and library callers get the same errors
    value_threshold_percent: Decimal = config.VALUE_THRESHOLD_PERCENT
    minimum_pool_size: Decimal = config.MINIMUM_POOL_SIZE
    max_dilution_percent: Decimal = config.MAX_DILUTION_PERCENT
    default_stake: Decimal = config.DEFAULT_STAKE_FOR_DILUTION
    top_bet_count: int = config.TOP_BET_COUNT
    odds_type: str = config.ODDS_TYPE


class AnalysisRequest(BaseModel):
    race: RaceSnapshotIn
    settings: SettingsIn = SettingsIn()


class ExactaValueBetOut(BaseModel):
    first: int
    second: int
    first_name: str
    second_name: str
    combination: str
    display_name: str
    tote_odds: Decimal
    fair_odds: Decimal
    value_percent: Decimal
    pool_size: Decimal
    dilution_factor: Decimal
    effective_odds: Decimal
    race_name: str


class TrifectaValueBetOut(ExactaValueBetOut):
    third: int
    third_name: str


class AnalysisResponse(BaseModel):
    race_name: str
    exacta: List[ExactaValueBetOut]
    trifecta: List[TrifectaValueBetOut]


class HealthResponse(BaseModel):
    status: str
    version: str
