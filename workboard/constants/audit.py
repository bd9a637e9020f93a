from enum import Enum


class AuditAction(Enum):
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    LOGIN = "LOGIN"
    LOGOUT = "LOGOUT"
    ACCESS_DENIED = "ACCESS_DENIED"


class AuditDateRange(Enum):
    TODAY = "today"
    YESTERDAY = "yesterday"
    WEEK = "week"
    MONTH = "month"


class BulkOperation(Enum):
    RELEASE_TASKS = "RELEASE_TASKS"
    MARK_OVERDUE = "MARK_OVERDUE"
    DELETE_LIST_ITEMS = "DELETE_LIST_ITEMS"
    DETACH_GOAL = "DETACH_GOAL"


REDACTED = "[REDACTED]"
SENSITIVE_KEY_FRAGMENTS = ("password", "token", "secret", "key", "auth")

BULK_OPERATION_DOC_ID = "BULK_OPERATION"
AUTH_COLLECTION = "auth"
SYSTEM_ACTOR_ID = "system"
SYSTEM_ACTOR_NAME = "System"
SYSTEM_ACTOR_EMAIL = "system@workboard.local"

CSV_EXPORT_HEADERS = ["Timestamp", "User", "Action", "Collection", "Document ID", "Changes"]
CSV_EXPORT_FILENAME = "audit-logs-{0}.csv"
