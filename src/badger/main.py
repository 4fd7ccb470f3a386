"""Wiring for hosts that embed the badge streak engine.

Component wiring order:
1. AppSettings (configuration)
2. Logging setup
3. BadgeDatabase (aiosqlite connection, schema)
4. SqliteRecordStore
5. BadgeStreakEngine

The host feeds events with ``await engine.on_daily_observation(event)``
while the context is open.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from badger.config import AppSettings
from badger.logging import get_logger, setup_logging
from badger.storage.database import BadgeDatabase
from badger.storage.store import SqliteRecordStore
from badger.streaks.engine import BadgeStreakEngine


@asynccontextmanager
async def open_engine(settings: AppSettings | None = None) -> AsyncIterator[BadgeStreakEngine]:
    """Open the database and yield a ready engine; closes the database on exit."""
    if settings is None:
        settings = AppSettings()

    setup_logging(settings.log_level)
    logger = get_logger("badger.main")

    async with BadgeDatabase(settings.storage.db_path) as database:
        store = SqliteRecordStore(
            database,
            settings.badge,
            state_id=settings.tracker.state_id,
        )
        logger.info(
            "badge_engine_ready",
            asset_id=settings.tracker.asset_id,
            badge_id=settings.badge.badge_id,
        )
        yield BadgeStreakEngine(store, settings.tracker)
