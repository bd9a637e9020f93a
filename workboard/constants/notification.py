from enum import Enum


class NotificationType(Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


DEFAULT_MAX_ACTIVE = 5
DEFAULT_TTL_SECONDS = 5
