"""Claim period construction for a streak that just ended."""

from badger.models import Badge, ClaimPeriod
from badger.streaks.day_gate import day_index


def build_claim_period(
    block_identity: str,
    event_timestamp: int,
    badge: Badge,
) -> ClaimPeriod:
    """Build the claim period for the streak ``badge`` is carrying.

    Must be called with the badge *before* its streak is reset: the
    pre-reset ``current_streak`` is both the streak length and the number
    of days between the start and the day the streak broke.

    Args:
        block_identity: Identity of the block that broke the streak; becomes
            the claim period id.
        event_timestamp: Timestamp of that block, in seconds.
        badge: Badge whose streak ended.
    """
    end_day = day_index(event_timestamp)
    return ClaimPeriod(
        id=block_identity,
        badge_id=badge.id,
        start_day=end_day - badge.current_streak,
        end_day=end_day,
        streak_length=badge.current_streak,
    )
