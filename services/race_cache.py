"""
Race snapshot cache.

Sits between the tote feed and the analysis engine: loads every race once,
serves snapshots by name until invalidated. The loader does the actual
fetch (GraphQL, bundled JSON, test fixture...).
"""
import dataclasses
import logging
import threading
from typing import Callable, Dict, List, Mapping, Optional

from models.race import AvailableRace, RaceSnapshot
from services.fair_odds import synthetic_win_odds

logger = logging.getLogger(__name__)

SnapshotLoader = Callable[[], Mapping[str, RaceSnapshot]]


class RaceSnapshotCache:
    """
    Load-once cache of race snapshots keyed by race name ("<VENUE> RACE <N>").
    Thread-safe: concurrent callers share a single load.
    """

    def __init__(self, loader: SnapshotLoader):
        self._loader = loader
        self._races: Optional[Dict[str, RaceSnapshot]] = None
        self._lock = threading.Lock()
        self.load_count = 0

    def get(self, race_name: str) -> Optional[RaceSnapshot]:
        """Snapshot for a race (exact, case-sensitive name), or None if the feed doesn't have it."""
        return self._load().get(race_name)

    def available_races(self) -> List[AvailableRace]:
        races = self._load()
        return [
            AvailableRace(
                base_name=name,
                display_name=f"{name}  {races[name].pool_summary()}".strip(),
            )
            for name in sorted(races)
        ]

    def invalidate(self):
        """Drop cached races so the next call fetches fresh data (user-initiated refresh)."""
        with self._lock:
            self._races = None
        logger.info("Race snapshot cache invalidated")

    def _load(self) -> Dict[str, RaceSnapshot]:
        races = self._races
        if races is not None:
            return races

        with self._lock:
            if self._races is not None:
                return self._races

            loaded = self._loader()
            self.load_count += 1
            self._races = {name: _with_win_odds(snapshot) for name, snapshot in loaded.items()}
            logger.info(f"Loaded {len(self._races)} race snapshots")
            return self._races


def _with_win_odds(snapshot: RaceSnapshot) -> RaceSnapshot:
    """Fill in placeholder WIN odds for races whose feed has no WIN market."""
    if snapshot.win_odds:
        return snapshot
    logger.warning(f"{snapshot.race_name}: no WIN odds, using synthetic odds for {len(snapshot.runner_names)} runners")
    return dataclasses.replace(snapshot, win_odds=synthetic_win_odds(len(snapshot.runner_names)))
