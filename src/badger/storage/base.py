"""Abstract record store interface plus a dict-backed implementation.

The engine depends only on RecordStore. Badge and EngineState are
load-or-default singletons: until a record has been put, reads return the
configured defaults.
"""

from abc import ABC, abstractmethod
from dataclasses import replace

from badger.config import BadgeSettings
from badger.models import Badge, ClaimPeriod, EngineState, PriceObservation

Record = Badge | EngineState | ClaimPeriod | PriceObservation


class RecordStore(ABC):
    """Keyed access to the handful of records the engine reads and writes."""

    @abstractmethod
    async def get_price_observation(
        self, asset_id: str, day_index: int
    ) -> PriceObservation | None:
        """Return the observation for (asset, day), or None if absent."""
        ...

    @abstractmethod
    async def get_engine_state(self) -> EngineState:
        """Return the engine state, defaulting to last_processed_day = -1."""
        ...

    @abstractmethod
    async def get_badge(self) -> Badge:
        """Return the badge, defaulting to the configured definition."""
        ...

    @abstractmethod
    async def get_claim_period(self, claim_id: str) -> ClaimPeriod | None:
        """Return a claim period by id, or None if absent."""
        ...

    @abstractmethod
    async def get_claim_periods(self) -> list[ClaimPeriod]:
        """Return all claim periods ordered by end_day."""
        ...

    @abstractmethod
    async def put(self, *records: Record) -> None:
        """Upsert all records atomically.

        ClaimPeriods are insert-if-absent: an existing record with the same
        id is left untouched.

        Raises:
            TypeError: If a record type is not supported.
        """
        ...


class InMemoryRecordStore(RecordStore):
    """Dict-backed RecordStore for embedding and tests."""

    def __init__(self, badge_settings: BadgeSettings, state_id: str = "1") -> None:
        self._badge_settings = badge_settings
        self._state_id = state_id
        self._badge: Badge | None = None
        self._engine_state: EngineState | None = None
        self._claim_periods: dict[str, ClaimPeriod] = {}
        self._observations: dict[tuple[str, int], PriceObservation] = {}

    async def get_price_observation(
        self, asset_id: str, day_index: int
    ) -> PriceObservation | None:
        return self._observations.get((asset_id.lower(), day_index))

    async def get_engine_state(self) -> EngineState:
        if self._engine_state is None:
            return EngineState(id=self._state_id)
        return replace(self._engine_state)

    async def get_badge(self) -> Badge:
        if self._badge is None:
            return Badge.from_settings(self._badge_settings)
        return replace(self._badge)

    async def get_claim_period(self, claim_id: str) -> ClaimPeriod | None:
        return self._claim_periods.get(claim_id)

    async def get_claim_periods(self) -> list[ClaimPeriod]:
        return sorted(self._claim_periods.values(), key=lambda cp: cp.end_day)

    async def put(self, *records: Record) -> None:
        # Validate everything first so a bad record leaves the store untouched
        for record in records:
            if not isinstance(record, (Badge, EngineState, ClaimPeriod, PriceObservation)):
                raise TypeError(f"Unsupported record type: {type(record).__name__}")

        for record in records:
            if isinstance(record, Badge):
                self._badge = replace(record)
            elif isinstance(record, EngineState):
                self._engine_state = replace(record)
            elif isinstance(record, ClaimPeriod):
                self._claim_periods.setdefault(record.id, record)
            else:
                asset_id = record.asset_id.lower()
                self._observations[(asset_id, record.day_index)] = replace(record, asset_id=asset_id)
