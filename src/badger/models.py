"""Shared data models for the badge streak engine.

CRITICAL: All prices and thresholds use Decimal. Never use float for price changes.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from badger.config import BadgeSettings
from badger.exceptions import InvalidBadgeError


class StreakOutcome(str, Enum):
    """What a single day's evaluation did to the badge."""

    INCREMENTED = "incremented"
    RESET = "reset"
    RESET_AND_CLAIMED = "reset_and_claimed"
    INCONCLUSIVE = "inconclusive"  # price data missing or unusable
    INACTIVE = "inactive"  # day outside the badge's active window


@dataclass
class Badge:
    """Badge definition plus its mutable streak counter."""

    id: str
    name: str
    delta_threshold: Decimal  # signed fraction, -0.05 = 5% drop
    minimum_streak_length: int
    current_streak: int = 0
    active_from: int = 0  # day index
    active_until: int = -1  # day index, -1 = unbounded

    def __post_init__(self) -> None:
        if self.minimum_streak_length < 1:
            raise InvalidBadgeError(
                f"minimum_streak_length must be >= 1, got {self.minimum_streak_length}"
            )
        if self.current_streak < 0:
            raise InvalidBadgeError(
                f"current_streak must be >= 0, got {self.current_streak}"
            )

    @classmethod
    def from_settings(cls, settings: BadgeSettings) -> "Badge":
        """Build the initial badge (streak 0) from configuration."""
        return cls(
            id=settings.badge_id,
            name=settings.name,
            delta_threshold=settings.delta_threshold,
            minimum_streak_length=settings.minimum_streak_length,
            current_streak=0,
            active_from=settings.active_from,
            active_until=settings.active_until,
        )

    def is_active_on(self, day: int) -> bool:
        """Whether the badge is evaluated on the given day index."""
        if day < self.active_from:
            return False
        return self.active_until == -1 or day <= self.active_until


@dataclass
class EngineState:
    """Day gate bookkeeping. last_processed_day = -1 means never processed."""

    id: str
    last_processed_day: int = -1


@dataclass(frozen=True)
class PriceObservation:
    """Daily USD price of one asset, produced upstream."""

    asset_id: str
    day_index: int
    price_usd: Decimal


@dataclass(frozen=True)
class ClaimPeriod:
    """A completed qualifying streak. Never mutated after creation.

    ``id`` is the identity of the block whose event ended the streak, so
    replaying that event cannot create a second record.
    """

    id: str
    badge_id: str
    start_day: int
    end_day: int
    streak_length: int


@dataclass(frozen=True)
class DailyObservationEvent:
    """Trigger event delivered by the host, one or more per day."""

    block_timestamp: int  # Unix seconds
    block_identity: str
    asset_id: str


@dataclass(frozen=True)
class StreakEvaluation:
    """Result of evaluating one day: the updated badge and any new claim period."""

    outcome: StreakOutcome
    badge: Badge
    claim_period: ClaimPeriod | None = None
    price_change: Decimal | None = None
