"""Streak state machine: day gate, evaluator, claim periods and the engine
that ties them to a record store.
"""

from badger.streaks.claim_period import build_claim_period
from badger.streaks.day_gate import (
    SECONDS_PER_DAY,
    day_index,
    is_tracked_asset,
    mark_processed,
    should_process,
)
from badger.streaks.engine import BadgeStreakEngine
from badger.streaks.evaluator import compute_price_change, evaluate, satisfies_threshold

__all__ = [
    "SECONDS_PER_DAY",
    "BadgeStreakEngine",
    "build_claim_period",
    "compute_price_change",
    "day_index",
    "evaluate",
    "is_tracked_asset",
    "mark_processed",
    "satisfies_threshold",
    "should_process",
]
