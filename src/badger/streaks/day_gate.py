"""Day gate: process each calendar day at most once.

The trigger stream may deliver many events per day. The first event of a
new day passes the gate; every later event that day (and any replayed or
late event) is a no-op. The gate only advances after the day's evaluation
has finished, and it advances even when the evaluation was inconclusive.
"""

from dataclasses import replace

from badger.exceptions import InvalidEventError
from badger.models import EngineState

SECONDS_PER_DAY = 86400


def day_index(timestamp: int) -> int:
    """Map a Unix timestamp (seconds) to its day index.

    Raises:
        InvalidEventError: If the timestamp is negative.
    """
    if timestamp < 0:
        raise InvalidEventError(f"block timestamp must be non-negative, got {timestamp}")
    return timestamp // SECONDS_PER_DAY


def is_tracked_asset(asset_id: str, tracked_asset_id: str) -> bool:
    """Whether an observation belongs to the asset the engine follows.

    Hex addresses arrive in mixed case from some feeds, so compare lowercased.
    """
    return asset_id.lower() == tracked_asset_id.lower()


def should_process(event_day: int, state: EngineState) -> bool:
    """True only for a day strictly newer than the last processed one."""
    return event_day > state.last_processed_day


def mark_processed(event_day: int, state: EngineState) -> EngineState:
    """Return the state advanced to ``event_day``.

    Never moves backwards: an older day returns the state unchanged.
    """
    if event_day <= state.last_processed_day:
        return state
    return replace(state, last_processed_day=event_day)
