import math
from datetime import datetime

from workboard.constants.goal import (
    AHEAD_VARIANCE_THRESHOLD,
    AT_RISK_VARIANCE_THRESHOLD,
    BEHIND_VARIANCE_THRESHOLD,
    GoalHealth,
)

SECONDS_PER_DAY = 60 * 60 * 24


def _elapsed_days(start: datetime, end: datetime) -> int:
    return math.ceil((end - start).total_seconds() / SECONDS_PER_DAY)


def expected_progress(created: datetime, target: datetime | None, now: datetime) -> int:
    """
    Percentage of the goal's time window that has elapsed, clamped to [0, 100].
    """
    if target is None:
        return 0
    total_days = max(1, _elapsed_days(created, target))
    days_passed = max(0, _elapsed_days(created, now))
    return min(math.floor(days_passed / total_days * 100 + 0.5), 100)


def classify_goal_health(progress: int, created: datetime, target: datetime | None, now: datetime) -> GoalHealth | None:
    if target is None:
        return None

    if now > target and progress < 100:
        return GoalHealth.OVERDUE

    variance = progress - expected_progress(created, target, now)
    if variance < BEHIND_VARIANCE_THRESHOLD:
        return GoalHealth.BEHIND
    if variance <= AT_RISK_VARIANCE_THRESHOLD:
        return GoalHealth.AT_RISK
    if variance > AHEAD_VARIANCE_THRESHOLD:
        return GoalHealth.AHEAD
    return GoalHealth.ON_TARGET
