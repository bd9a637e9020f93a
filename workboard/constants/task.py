from enum import Enum


class TaskStatus(Enum):
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    OVERDUE = "Incomplete - Overdue"


class TaskPriority(Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


SORT_FIELD_DUE_DATE = "dueDate"
SORT_FIELD_CREATED_DATE = "createdDate"
SORT_FIELD_PRIORITY = "priority"

SORT_FIELDS = [SORT_FIELD_DUE_DATE, SORT_FIELD_CREATED_DATE, SORT_FIELD_PRIORITY]

SORT_ORDER_ASC = "asc"
SORT_ORDER_DESC = "desc"

DEFAULT_SORT_FIELD = SORT_FIELD_DUE_DATE
DEFAULT_SORT_ORDER = SORT_ORDER_ASC
