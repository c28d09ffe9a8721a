"""Tests for the FastAPI endpoints."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from decimal import Decimal

from fastapi.testclient import TestClient

from main import app

client = TestClient(app)

RACE = {
    "race_name": "KENILWORTH RACE 1",
    "event_id": "evt-1",
    "win_odds": {"1": 2.0, "2": 4.0, "3": 6.0},
    "runner_names": {"1": "Alpha", "2": "Bravo"},
    "exacta_odds": {"1-2": 12.0, "bad-key": 50},
    "exacta_pool": {"net": 6000},
}


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_value_bets():
    resp = client.post("/v1/value-bets", json={"race": RACE})
    assert resp.status_code == 200
    data = resp.json()
    assert data["race_name"] == "KENILWORTH RACE 1"
    assert data["trifecta"] == []
    assert len(data["exacta"]) == 1
    bet = data["exacta"][0]
    assert bet["combination"] == "1-2"
    assert bet["display_name"] == "1. Alpha → 2. Bravo"
    assert bet["second_name"] == "Bravo"
    assert Decimal(str(bet["fair_odds"])) == Decimal("4")
    assert Decimal(str(bet["value_percent"])) == Decimal("200")


def test_value_bets_thin_pool():
    race = dict(RACE, exacta_pool={"net": 4000})
    resp = client.post("/v1/value-bets", json={"race": race})
    assert resp.status_code == 200
    assert resp.json()["exacta"] == []


def test_value_calculations_gated_and_unfiltered():
    race = dict(RACE, exacta_pool={"net": 4000})
    gated = client.post("/v1/value-calculations", json={"race": race})
    assert gated.json()["exacta"] == []

    unfiltered = client.post("/v1/value-calculations?gated=false", json={"race": race})
    assert [b["combination"] for b in unfiltered.json()["exacta"]] == ["1-2"]


def test_custom_settings():
    body = {"race": RACE, "settings": {"value_threshold_percent": 250}}
    resp = client.post("/v1/value-bets", json=body)
    assert resp.json()["exacta"] == []


def test_invalid_settings_rejected():
    body = {"race": RACE, "settings": {"minimum_pool_size": -1}}
    resp = client.post("/v1/value-bets", json=body)
    assert resp.status_code == 422
    assert "minimum_pool_size" in resp.json()["detail"]


def test_malformed_request_rejected():
    resp = client.post("/v1/value-bets", json={"race": {"win_odds": {"1": "evens"}}})
    assert resp.status_code == 422
