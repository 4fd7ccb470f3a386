"""Tests for InMemoryRecordStore."""

from dataclasses import replace
from decimal import Decimal

import pytest

from badger.config import ADDRESS_WETH, BadgeSettings
from badger.models import Badge, ClaimPeriod, EngineState, PriceObservation
from badger.storage.base import InMemoryRecordStore


class TestInMemoryRecordStore:
    @pytest.mark.asyncio
    async def test_defaults(
        self, memory_store: InMemoryRecordStore, badge_settings: BadgeSettings
    ) -> None:
        assert await memory_store.get_engine_state() == EngineState(id="1")
        assert await memory_store.get_badge() == Badge.from_settings(badge_settings)
        assert await memory_store.get_claim_periods() == []

    @pytest.mark.asyncio
    async def test_custom_state_id(self, badge_settings: BadgeSettings) -> None:
        store = InMemoryRecordStore(badge_settings, state_id="gate-2")
        assert (await store.get_engine_state()).id == "gate-2"

    @pytest.mark.asyncio
    async def test_reads_are_copies(self, memory_store: InMemoryRecordStore) -> None:
        """Mutating a loaded badge must not change the stored one until put()."""
        badge = await memory_store.get_badge()
        await memory_store.put(badge)

        loaded = await memory_store.get_badge()
        loaded.current_streak = 5

        assert (await memory_store.get_badge()).current_streak == 0

    @pytest.mark.asyncio
    async def test_claim_period_insert_if_absent(self, memory_store: InMemoryRecordStore) -> None:
        first = ClaimPeriod(id="0xa", badge_id="1", start_day=1, end_day=4, streak_length=3)
        await memory_store.put(first)
        await memory_store.put(replace(first, streak_length=9, start_day=-5))

        assert await memory_store.get_claim_period("0xa") == first

    @pytest.mark.asyncio
    async def test_observation_lookup_ignores_address_case(
        self, memory_store: InMemoryRecordStore
    ) -> None:
        await memory_store.put(
            PriceObservation(asset_id=ADDRESS_WETH.upper(), day_index=3, price_usd=Decimal("10"))
        )
        obs = await memory_store.get_price_observation(ADDRESS_WETH, 3)
        assert obs is not None
        assert obs.price_usd == Decimal("10")
        assert obs.asset_id == ADDRESS_WETH

    @pytest.mark.asyncio
    async def test_unsupported_record_leaves_store_untouched(
        self, memory_store: InMemoryRecordStore
    ) -> None:
        with pytest.raises(TypeError):
            await memory_store.put(EngineState(id="1", last_processed_day=3), "bogus")  # type: ignore[arg-type]

        assert (await memory_store.get_engine_state()).last_processed_day == -1
