"""Tests for value % and pool dilution calculations."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from decimal import Decimal

from services.value import value_percent, dilution_factor, dilution_percent, effective_odds

D = Decimal


def test_value_percent_positive_when_tote_beats_fair():
    # Sign convention: (tote / fair - 1) * 100. Tote 3 vs fair 2 → +50%
    assert value_percent(D("2"), D("3")) == D("50")


def test_value_percent_negative_when_tote_below_fair():
    # Tote 2 vs fair 4 → -50%
    assert value_percent(D("4"), D("2")) == D("-50")


def test_value_percent_zero_fair():
    assert value_percent(D("0"), D("10")) == 0
    assert value_percent(D("-1"), D("10")) == 0


def test_dilution_factor():
    # 9900 / (9900 + 100) = 0.99
    assert dilution_factor(D("9900"), D("100")) == D("0.99")


def test_dilution_factor_empty_pool():
    assert dilution_factor(D("0"), D("0")) == 1
    # Empty pool with a stake: our money is the whole pool
    assert dilution_factor(D("0"), D("100")) == 0


def test_dilution_percent():
    assert dilution_percent(D("0.99")) == D("1.00")
    assert dilution_percent(D("1")) == 0


def test_effective_odds():
    # 5 * 0.99 = 4.95
    assert effective_odds(D("5"), D("0.99")) == D("4.95")
