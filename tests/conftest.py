"""Shared test fixtures for the badge streak engine."""

from decimal import Decimal

import pytest

from badger.config import ADDRESS_WETH, BadgeSettings, TrackerSettings
from badger.storage.base import InMemoryRecordStore
from badger.streaks.engine import BadgeStreakEngine


@pytest.fixture
def badge_settings() -> BadgeSettings:
    """Downward 5% badge, minimum streak 3, active from day 0."""
    return BadgeSettings(
        badge_id="1",
        name="Winter",
        delta_threshold=Decimal("-0.05"),
        minimum_streak_length=3,
        active_from=0,
        active_until=-1,
    )


@pytest.fixture
def tracker_settings() -> TrackerSettings:
    return TrackerSettings(asset_id=ADDRESS_WETH, state_id="1")


@pytest.fixture
def memory_store(badge_settings: BadgeSettings) -> InMemoryRecordStore:
    return InMemoryRecordStore(badge_settings)


@pytest.fixture
def engine(
    memory_store: InMemoryRecordStore, tracker_settings: TrackerSettings
) -> BadgeStreakEngine:
    return BadgeStreakEngine(memory_store, tracker_settings)
