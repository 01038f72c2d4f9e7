"""Run-rate projection: days left until an arm reaches its target sample."""

import math
from typing import Optional


def days_remaining(
    current_impressions: int,
    target_impressions: int,
    days_elapsed: int,
) -> Optional[int]:
    """
    Days needed at the current daily rate to reach the target.

    Returns None when the rate is undefined (no days elapsed or no
    impressions yet), and 0 when the target is already met.
    """
    if days_elapsed <= 0 or current_impressions <= 0:
        return None

    daily_rate = current_impressions / days_elapsed
    remaining = target_impressions - current_impressions
    if remaining <= 0:
        return 0

    return int(math.ceil(remaining / daily_rate))
