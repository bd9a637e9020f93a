import logging
import threading
import time
import uuid
from collections import OrderedDict
from datetime import datetime, timezone
from typing import Callable, Dict, List

from django.apps import apps
from django.conf import settings

from workboard.constants.notification import DEFAULT_MAX_ACTIVE, DEFAULT_TTL_SECONDS, NotificationType
from workboard.dto.notification_dto import NotificationDTO
from workboard.exceptions.notification_exceptions import NotificationNotFoundException

logger = logging.getLogger(__name__)


class NotificationQueue:
    """
    Bounded queue of transient notifications for one member.

    Showing a notification beyond `max_size` drops the oldest one. Each notification
    expires `ttl_seconds` after it was shown; expired entries are purged whenever the
    queue is read.
    """

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_ACTIVE,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: "OrderedDict[str, tuple[NotificationDTO, float]]" = OrderedDict()

    def show(self, notification_type: NotificationType, title: str, message: str) -> NotificationDTO:
        notification = NotificationDTO(
            id=uuid.uuid4().hex,
            type=notification_type,
            title=title,
            message=message,
            timestamp=datetime.now(timezone.utc),
        )
        self._entries[notification.id] = (notification, self._clock() + self.ttl_seconds)
        while len(self._entries) > self.max_size:
            self._entries.popitem(last=False)
        return notification

    def remove(self, notification_id: str) -> bool:
        return self._entries.pop(notification_id, None) is not None

    def list(self) -> List[NotificationDTO]:
        self._purge_expired()
        return [notification for notification, _ in self._entries.values()]

    def clear(self) -> None:
        self._entries.clear()

    def _purge_expired(self) -> None:
        now = self._clock()
        expired = [key for key, (_, expires_at) in self._entries.items() if expires_at <= now]
        for key in expired:
            del self._entries[key]

    def __len__(self) -> int:
        self._purge_expired()
        return len(self._entries)


class NotificationRegistry:
    """Owns one `NotificationQueue` per team member for the lifetime of the process."""

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_ACTIVE,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._queues: Dict[str, NotificationQueue] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls) -> "NotificationRegistry":
        config = getattr(settings, "NOTIFICATIONS", {})
        return cls(
            max_size=config.get("MAX_ACTIVE", DEFAULT_MAX_ACTIVE),
            ttl_seconds=config.get("TTL_SECONDS", DEFAULT_TTL_SECONDS),
        )

    def _get_queue(self, member_id: str) -> NotificationQueue:
        queue = self._queues.get(member_id)
        if queue is None:
            queue = NotificationQueue(self.max_size, self.ttl_seconds, self._clock)
            self._queues[member_id] = queue
        return queue

    def show(self, member_id: str, notification_type: NotificationType, title: str, message: str) -> NotificationDTO:
        with self._lock:
            return self._get_queue(member_id).show(notification_type, title, message)

    def success(self, member_id: str, title: str, message: str) -> NotificationDTO:
        return self.show(member_id, NotificationType.SUCCESS, title, message)

    def error(self, member_id: str, title: str, message: str) -> NotificationDTO:
        return self.show(member_id, NotificationType.ERROR, title, message)

    def list(self, member_id: str) -> List[NotificationDTO]:
        with self._lock:
            return self._get_queue(member_id).list()

    def remove(self, member_id: str, notification_id: str) -> None:
        with self._lock:
            removed = self._get_queue(member_id).remove(notification_id)
        if not removed:
            raise NotificationNotFoundException(notification_id)

    def clear(self, member_id: str) -> None:
        with self._lock:
            self._queues.pop(member_id, None)


def get_notification_registry() -> NotificationRegistry:
    return apps.get_app_config("workboard").notification_registry
