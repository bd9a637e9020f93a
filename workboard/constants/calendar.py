from enum import Enum


class CalendarEventType(Enum):
    TASK = "task"
    GOAL = "goal"


class CalendarColor:
    COMPLETED = ("#10b981", "#059669")
    OVERDUE = ("#ef4444", "#dc2626")
    HIGH = ("#f59e0b", "#d97706")
    MEDIUM = ("#3b82f6", "#2563eb")
    LOW = ("#6b7280", "#4b5563")
    GOAL_ACTIVE = ("#8b5cf6", "#7c3aed")
    GOAL_INACTIVE = ("#6b7280", "#4b5563")


# appended to the background colour of tasks in the open pool
UNASSIGNED_ALPHA = "80"

OPEN_TASK_PREFIX = "\U0001f513 "
OWN_TASK_PREFIX = "\U0001f4cb "
OTHER_MEMBER_TASK_PREFIX = "\U0001f464 "
GOAL_PREFIX = "\U0001f3af "

UNASSIGNED_LABEL = "Unassigned"
