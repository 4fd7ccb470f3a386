"""Badge streak engine: the single entry point the event host calls.

Per event:
1. Drop observations for any asset other than the tracked one
2. Drop events whose day has already been processed (day gate)
3. Load the badge and the two prior days' price observations
4. Evaluate the day (pure, see streaks.evaluator)
5. Write gate state, badge and any new claim period in one atomic put

Invocations are serialized by a per-engine asyncio.Lock, so concurrent
callers cannot interleave a read-evaluate-write cycle. Events must still
arrive in non-decreasing timestamp order; a late event for an already
processed day is dropped by the gate.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from badger.config import TrackerSettings
from badger.logging import event_context, get_logger
from badger.models import DailyObservationEvent
from badger.streaks.day_gate import day_index, is_tracked_asset, mark_processed, should_process
from badger.streaks.evaluator import evaluate

if TYPE_CHECKING:
    from badger.storage.base import Record, RecordStore

logger = get_logger(__name__)


class BadgeStreakEngine:
    """Drives the badge streak from daily observation events.

    Args:
        store: Record store holding gate state, badge, claim periods and
            the upstream price observations.
        tracker_settings: Which asset to follow.
    """

    def __init__(self, store: RecordStore, tracker_settings: TrackerSettings) -> None:
        self._store = store
        self._asset_id = tracker_settings.asset_id
        self._lock = asyncio.Lock()

    @property
    def store(self) -> RecordStore:
        return self._store

    async def on_daily_observation(self, event: DailyObservationEvent) -> None:
        """Process one trigger event. Safe to call any number of times per day."""
        if not is_tracked_asset(event.asset_id, self._asset_id):
            return

        event_day = day_index(event.block_timestamp)

        async with self._lock:
            with event_context(event.block_identity, event_day):
                await self._process_day(event, event_day)

    async def _process_day(self, event: DailyObservationEvent, event_day: int) -> None:
        state = await self._store.get_engine_state()
        if not should_process(event_day, state):
            logger.debug(
                "stale_event_skipped",
                last_processed_day=state.last_processed_day,
            )
            return

        badge = await self._store.get_badge()
        previous_day = await self._store.get_price_observation(self._asset_id, event_day - 1)
        day_before = await self._store.get_price_observation(self._asset_id, event_day - 2)

        result = evaluate(event, badge, previous_day, day_before)

        records: list[Record] = [result.badge]
        if result.claim_period is not None:
            existing = await self._store.get_claim_period(result.claim_period.id)
            if existing is None:
                records.append(result.claim_period)
            else:
                logger.debug("claim_period_exists", claim_id=existing.id)
        records.append(mark_processed(event_day, state))

        await self._store.put(*records)

        logger.info(
            "badge_day_processed",
            outcome=result.outcome.value,
            current_streak=result.badge.current_streak,
        )

