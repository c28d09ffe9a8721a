"""Tests for the race snapshot model."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import dataclasses
from decimal import Decimal

import pytest

from models.race import PoolAmounts, RaceSnapshot

D = Decimal


def make_snapshot(**overrides):
    fields = dict(
        race_name="KENILWORTH RACE 1",
        event_id="evt-1",
        win_odds={1: D("2.0"), 2: D("4.0"), 3: D("6.0")},
        runner_names={1: "Alpha", 2: "Bravo"},
        exacta_odds={"1-2": D("12.0")},
        exacta_pool=PoolAmounts(net=D("6000")),
    )
    fields.update(overrides)
    return RaceSnapshot(**fields)


def test_valid_with_exacta():
    assert make_snapshot().has_valid_data


def test_valid_with_trifecta_only():
    snap = make_snapshot(
        exacta_odds={},
        exacta_pool=PoolAmounts(),
        trifecta_odds={"1-2-3": D("40")},
        trifecta_pool=PoolAmounts(net=D("8000")),
    )
    assert snap.has_valid_data


def test_invalid_with_one_win_odds():
    assert not make_snapshot(win_odds={1: D("2.0")}).has_valid_data


def test_invalid_without_exacta_pool():
    assert not make_snapshot(exacta_pool=PoolAmounts(net=D("0"))).has_valid_data


def test_invalid_with_pool_but_no_odds():
    assert not make_snapshot(exacta_odds={}).has_valid_data


def test_runner_name_fallback():
    snap = make_snapshot()
    assert snap.runner_name(1) == "Alpha"
    assert snap.runner_name(3) == "#3"


def test_snapshot_is_read_only():
    snap = make_snapshot()
    with pytest.raises(TypeError):
        snap.win_odds[4] = D("10")
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.race_name = "OTHER"


def test_snapshot_copies_input_mappings():
    win = {1: D("2.0"), 2: D("4.0")}
    snap = make_snapshot(win_odds=win)
    win[3] = D("8.0")
    assert 3 not in snap.win_odds


def test_values_coerced_to_decimal():
    snap = make_snapshot(win_odds={"1": 2.5, 2: "4"}, exacta_pool=PoolAmounts(net=6000))
    assert snap.win_odds[1] == D("2.5")
    assert isinstance(snap.win_odds[2], Decimal)
    assert snap.exacta_pool.net == D("6000")


def test_refresh_produces_new_snapshot():
    snap = make_snapshot()
    refreshed = dataclasses.replace(snap, exacta_odds={"1-2": D("15.0")})
    assert snap.exacta_odds["1-2"] == D("12.0")
    assert refreshed.exacta_odds["1-2"] == D("15.0")


def test_pool_summary():
    snap = make_snapshot(exacta_pool=PoolAmounts(net=D("6000"), carry_in=D("1250.4")))
    assert snap.pool_summary() == "Exacta Pool £6,000  Carry-in £1,250  Guarantee £0  Top-up £0"


def test_pool_summary_with_trifecta():
    snap = make_snapshot(trifecta_pool=PoolAmounts(net=D("12000"), carry_in=D("500")))
    assert snap.pool_summary().endswith("Trifecta Pool £12,000  Trif. Carry-in £500")
