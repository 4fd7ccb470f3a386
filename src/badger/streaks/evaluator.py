"""Streak evaluator: one day-over-day price test per processed day.

For an event on day D the evaluator compares the tracked asset's price on
D-2 (the older day) with D-1 (the newer day):

    price_change = (price[D-1] - price[D-2]) / price[D-2]

The badge threshold is signed. A positive threshold describes an upward
badge (satisfied when the change is strictly above it); zero or negative
describes a downward badge (satisfied when the change is strictly below it).

All functions here are pure. ``evaluate`` returns a new Badge and never
mutates the one it was given; persistence is the caller's job.

CRITICAL: All computations use Decimal. Never use float.
"""

from dataclasses import replace
from decimal import Decimal

from badger.logging import get_logger
from badger.models import (
    Badge,
    DailyObservationEvent,
    PriceObservation,
    StreakEvaluation,
    StreakOutcome,
)
from badger.streaks.claim_period import build_claim_period
from badger.streaks.day_gate import day_index

logger = get_logger(__name__)


def compute_price_change(older_price: Decimal, newer_price: Decimal) -> Decimal:
    """Relative change from ``older_price`` to ``newer_price`` as a fraction.

    -0.05 means the newer price is 5% below the older one.

    Raises:
        decimal.DivisionByZero / decimal.InvalidOperation: If older_price is zero.
    """
    return (newer_price - older_price) / older_price


def satisfies_threshold(price_change: Decimal, delta_threshold: Decimal) -> bool:
    """Sign-dependent threshold test. Equality never satisfies."""
    if delta_threshold > 0:
        return price_change > delta_threshold
    return price_change < delta_threshold


def evaluate(
    event: DailyObservationEvent,
    badge: Badge,
    previous_day: PriceObservation | None,
    day_before: PriceObservation | None,
) -> StreakEvaluation:
    """Apply one day's price change to the badge streak.

    Args:
        event: The event that opened the new day.
        badge: Current badge state (not modified).
        previous_day: Observation for the event day minus one, if any.
        day_before: Observation for the event day minus two, if any.

    Returns:
        StreakEvaluation with the outcome, the resulting badge and, when a
        qualifying streak just ended, the claim period to create.
    """
    event_day = day_index(event.block_timestamp)

    if not badge.is_active_on(event_day):
        logger.debug("badge_inactive", badge_id=badge.id, day=event_day)
        return StreakEvaluation(outcome=StreakOutcome.INACTIVE, badge=badge)

    if previous_day is None or day_before is None:
        logger.debug(
            "price_data_missing",
            day=event_day,
            has_previous=previous_day is not None,
            has_day_before=day_before is not None,
        )
        return StreakEvaluation(outcome=StreakOutcome.INCONCLUSIVE, badge=badge)

    if day_before.price_usd == 0:
        logger.warning("zero_base_price", asset_id=day_before.asset_id, observation_day=day_before.day_index)
        return StreakEvaluation(outcome=StreakOutcome.INCONCLUSIVE, badge=badge)

    price_change = compute_price_change(day_before.price_usd, previous_day.price_usd)

    if satisfies_threshold(price_change, badge.delta_threshold):
        updated = replace(badge, current_streak=badge.current_streak + 1)
        logger.debug(
            "streak_incremented",
            day=event_day,
            price_change=str(price_change),
            current_streak=updated.current_streak,
        )
        return StreakEvaluation(
            outcome=StreakOutcome.INCREMENTED,
            badge=updated,
            price_change=price_change,
        )

    reset = replace(badge, current_streak=0)

    if badge.current_streak >= badge.minimum_streak_length:
        claim_period = build_claim_period(event.block_identity, event.block_timestamp, badge)
        logger.info(
            "streak_ended_with_claim",
            day=event_day,
            price_change=str(price_change),
            streak_length=claim_period.streak_length,
            start_day=claim_period.start_day,
            end_day=claim_period.end_day,
        )
        return StreakEvaluation(
            outcome=StreakOutcome.RESET_AND_CLAIMED,
            badge=reset,
            claim_period=claim_period,
            price_change=price_change,
        )

    logger.debug(
        "streak_ended",
        day=event_day,
        price_change=str(price_change),
        streak_length=badge.current_streak,
    )
    return StreakEvaluation(
        outcome=StreakOutcome.RESET,
        badge=reset,
        price_change=price_change,
    )
