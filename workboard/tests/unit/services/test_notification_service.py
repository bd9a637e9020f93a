from unittest import TestCase

from workboard.constants.notification import NotificationType
from workboard.exceptions.notification_exceptions import NotificationNotFoundException
from workboard.services.notification_service import NotificationQueue, NotificationRegistry


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class NotificationQueueTests(TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.queue = NotificationQueue(max_size=5, ttl_seconds=5, clock=self.clock)

    def test_show_returns_notification_with_unique_id(self):
        first = self.queue.show(NotificationType.SUCCESS, "Success", "Saved")
        second = self.queue.show(NotificationType.SUCCESS, "Success", "Saved")

        self.assertNotEqual(first.id, second.id)
        self.assertEqual(first.type, NotificationType.SUCCESS.value)

    def test_showing_beyond_capacity_drops_the_oldest(self):
        shown = [self.queue.show(NotificationType.INFO, "Info", f"Message {index}") for index in range(7)]

        active = self.queue.list()

        self.assertEqual(len(active), 5)
        self.assertEqual([item.id for item in active], [item.id for item in shown[2:]])

    def test_notifications_expire_after_ttl(self):
        self.queue.show(NotificationType.ERROR, "Error", "First")
        self.clock.advance(3)
        second = self.queue.show(NotificationType.ERROR, "Error", "Second")

        self.clock.advance(2)

        self.assertEqual([item.id for item in self.queue.list()], [second.id])
        self.clock.advance(3)
        self.assertEqual(len(self.queue), 0)

    def test_remove_reports_whether_notification_existed(self):
        notification = self.queue.show(NotificationType.WARNING, "Warning", "Careful")

        self.assertTrue(self.queue.remove(notification.id))
        self.assertFalse(self.queue.remove(notification.id))
        self.assertEqual(self.queue.list(), [])


class NotificationRegistryTests(TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.registry = NotificationRegistry(max_size=2, ttl_seconds=5, clock=self.clock)

    def test_queues_are_kept_per_member(self):
        self.registry.success("member-a", "Success", "Saved")
        self.registry.error("member-b", "Error", "Failed")

        member_a = self.registry.list("member-a")
        member_b = self.registry.list("member-b")

        self.assertEqual([item.message for item in member_a], ["Saved"])
        self.assertEqual([item.type for item in member_b], [NotificationType.ERROR.value])

    def test_registry_applies_capacity_to_each_queue(self):
        for index in range(3):
            self.registry.success("member-a", "Success", str(index))

        self.assertEqual([item.message for item in self.registry.list("member-a")], ["1", "2"])

    def test_remove_unknown_notification_raises(self):
        with self.assertRaises(NotificationNotFoundException):
            self.registry.remove("member-a", "missing")

    def test_remove_deletes_only_the_given_notification(self):
        kept = self.registry.success("member-a", "Success", "Kept")
        removed = self.registry.success("member-a", "Success", "Removed")

        self.registry.remove("member-a", removed.id)

        self.assertEqual([item.id for item in self.registry.list("member-a")], [kept.id])

    def test_clear_drops_member_queue(self):
        self.registry.success("member-a", "Success", "Saved")

        self.registry.clear("member-a")

        self.assertEqual(self.registry.list("member-a"), [])
