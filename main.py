"""
FastAPI value bet calculation service for tote exacta/trifecta pools.
"""
import logging

from fastapi import FastAPI, HTTPException

import config
from models.schemas import AnalysisRequest, AnalysisResponse, HealthResponse
from models.settings import InvalidConfiguration, ValueBetSettings
from services.analysis import (
    all_trifecta_calculations_gated,
    all_trifecta_calculations_unfiltered,
    all_value_calculations_gated,
    all_value_calculations_unfiltered,
    top_trifecta_value_bets,
    top_value_bets,
)

# Setup logging
handlers = [logging.StreamHandler()]
if config.LOG_FILE:
    handlers.append(logging.FileHandler(config.LOG_FILE))
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=config.LOG_LEVEL,
    handlers=handlers,
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Tote Value Calculator", version=config.SERVICE_VERSION)


def _settings_from(request: AnalysisRequest) -> ValueBetSettings:
    try:
        return ValueBetSettings(**request.settings.model_dump())
    except InvalidConfiguration as e:
        logger.warning(f"Rejected settings: {e}")
        raise HTTPException(status_code=422, detail=str(e))


@app.get("/health", response_model=HealthResponse)
def health():
    return {"status": "ok", "version": config.SERVICE_VERSION}


@app.post("/v1/value-bets", response_model=AnalysisResponse)
def value_bets(request: AnalysisRequest):
    settings = _settings_from(request)
    snapshot = request.race.to_snapshot()

    return {
        "race_name": snapshot.race_name,
        "exacta": [b.to_dict() for b in top_value_bets(snapshot, settings)],
        "trifecta": [b.to_dict() for b in top_trifecta_value_bets(snapshot, settings)],
    }


@app.post("/v1/value-calculations", response_model=AnalysisResponse)
def value_calculations(request: AnalysisRequest, gated: bool = True):
    settings = _settings_from(request)
    snapshot = request.race.to_snapshot()

    if gated:
        exacta = all_value_calculations_gated(snapshot, settings)
        trifecta = all_trifecta_calculations_gated(snapshot, settings)
    else:
        exacta = all_value_calculations_unfiltered(snapshot, settings)
        trifecta = all_trifecta_calculations_unfiltered(snapshot, settings)

    return {
        "race_name": snapshot.race_name,
        "exacta": [b.to_dict() for b in exacta],
        "trifecta": [b.to_dict() for b in trifecta],
    }
