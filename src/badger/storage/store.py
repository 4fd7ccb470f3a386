"""SQLite-backed RecordStore.

All SQL is isolated behind this class. put() writes every record in one
transaction and commits once, so an invocation's gate advance, badge update
and claim period become visible together or not at all.

CRITICAL: Prices and thresholds stored as TEXT in SQLite, restored as Decimal on read.
"""

from decimal import Decimal

from badger.config import BadgeSettings
from badger.logging import get_logger
from badger.models import Badge, ClaimPeriod, EngineState, PriceObservation
from badger.storage.base import Record, RecordStore
from badger.storage.database import BadgeDatabase

logger = get_logger(__name__)


class SqliteRecordStore(RecordStore):
    """Async SQLite store for badge engine records.

    Usage:
        async with BadgeDatabase("data/badger.db") as database:
            store = SqliteRecordStore(database, BadgeSettings())
            badge = await store.get_badge()
    """

    def __init__(
        self,
        database: BadgeDatabase,
        badge_settings: BadgeSettings,
        state_id: str = "1",
    ) -> None:
        self._database = database
        self._badge_settings = badge_settings
        self._state_id = state_id

    # ──────────────────────────────────────────────
    # Read methods
    # ──────────────────────────────────────────────

    async def get_price_observation(
        self, asset_id: str, day_index: int
    ) -> PriceObservation | None:
        cursor = await self._database.db.execute(
            "SELECT asset_id, day_index, price_usd FROM price_observations "
            "WHERE asset_id = ? AND day_index = ?",
            (asset_id.lower(), day_index),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return PriceObservation(asset_id=row[0], day_index=row[1], price_usd=Decimal(row[2]))

    async def get_engine_state(self) -> EngineState:
        cursor = await self._database.db.execute(
            "SELECT id, last_processed_day FROM engine_state WHERE id = ?",
            (self._state_id,),
        )
        row = await cursor.fetchone()
        if row is None:
            return EngineState(id=self._state_id)
        return EngineState(id=row[0], last_processed_day=row[1])

    async def get_badge(self) -> Badge:
        cursor = await self._database.db.execute(
            "SELECT id, name, delta_threshold, minimum_streak_length, "
            "current_streak, active_from, active_until FROM badges WHERE id = ?",
            (self._badge_settings.badge_id,),
        )
        row = await cursor.fetchone()
        if row is None:
            return Badge.from_settings(self._badge_settings)
        return Badge(
            id=row[0],
            name=row[1],
            delta_threshold=Decimal(row[2]),
            minimum_streak_length=row[3],
            current_streak=row[4],
            active_from=row[5],
            active_until=row[6],
        )

    async def get_claim_period(self, claim_id: str) -> ClaimPeriod | None:
        cursor = await self._database.db.execute(
            "SELECT id, badge_id, start_day, end_day, streak_length "
            "FROM claim_periods WHERE id = ?",
            (claim_id,),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return _claim_period_from_row(row)

    async def get_claim_periods(self) -> list[ClaimPeriod]:
        cursor = await self._database.db.execute(
            "SELECT id, badge_id, start_day, end_day, streak_length "
            "FROM claim_periods ORDER BY end_day ASC"
        )
        rows = await cursor.fetchall()
        return [_claim_period_from_row(row) for row in rows]

    # ──────────────────────────────────────────────
    # Write methods
    # ──────────────────────────────────────────────

    async def put(self, *records: Record) -> None:
        db = self._database.db
        try:
            for record in records:
                if isinstance(record, EngineState):
                    await db.execute(
                        "INSERT OR REPLACE INTO engine_state (id, last_processed_day) "
                        "VALUES (?, ?)",
                        (record.id, record.last_processed_day),
                    )
                elif isinstance(record, Badge):
                    await db.execute(
                        "INSERT OR REPLACE INTO badges "
                        "(id, name, delta_threshold, minimum_streak_length, "
                        "current_streak, active_from, active_until) "
                        "VALUES (?, ?, ?, ?, ?, ?, ?)",
                        (
                            record.id,
                            record.name,
                            str(record.delta_threshold),
                            record.minimum_streak_length,
                            record.current_streak,
                            record.active_from,
                            record.active_until,
                        ),
                    )
                elif isinstance(record, ClaimPeriod):
                    await db.execute(
                        "INSERT OR IGNORE INTO claim_periods "
                        "(id, badge_id, start_day, end_day, streak_length) "
                        "VALUES (?, ?, ?, ?, ?)",
                        (
                            record.id,
                            record.badge_id,
                            record.start_day,
                            record.end_day,
                            record.streak_length,
                        ),
                    )
                elif isinstance(record, PriceObservation):
                    await db.execute(
                        "INSERT OR REPLACE INTO price_observations "
                        "(asset_id, day_index, price_usd) VALUES (?, ?, ?)",
                        (record.asset_id.lower(), record.day_index, str(record.price_usd)),
                    )
                else:
                    raise TypeError(f"Unsupported record type: {type(record).__name__}")
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        logger.debug("records_committed", count=len(records))


def _claim_period_from_row(row: tuple) -> ClaimPeriod:
    return ClaimPeriod(
        id=row[0],
        badge_id=row[1],
        start_day=row[2],
        end_day=row[3],
        streak_length=row[4],
    )
