from enum import Enum


class GoalType(Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    BI_ANNUAL = "bi-annual"
    YEARLY = "yearly"


class GoalStatus(Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    PAUSED = "paused"
    CANCELLED = "cancelled"


class GoalHealth(Enum):
    ON_TARGET = "On Target"
    AT_RISK = "At Risk"
    BEHIND = "Behind"
    OVERDUE = "Overdue"
    AHEAD = "Ahead of Schedule"


BEHIND_VARIANCE_THRESHOLD = -25
AT_RISK_VARIANCE_THRESHOLD = -10
AHEAD_VARIANCE_THRESHOLD = 15
