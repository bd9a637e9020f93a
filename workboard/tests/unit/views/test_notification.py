from rest_framework import status
from rest_framework.reverse import reverse

from workboard.tests.fixtures.team_member import OTHER_STAFF_ID, STAFF_ID, team_models
from workboard.tests.unit.views.base import AuthenticatedViewTestCase


class NotificationViewTests(AuthenticatedViewTestCase):
    member = team_models[1]

    def tearDown(self):
        super().tearDown()
        self.notifications.clear(OTHER_STAFF_ID)

    def test_lists_only_callers_notifications(self):
        own = self.notifications.success(STAFF_ID, "Success", "Task claimed successfully")
        self.notifications.success(OTHER_STAFF_ID, "Success", "Not yours")

        response = self.client.get(reverse("notifications"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item["id"] for item in response.data["notifications"]], [own.id])

    def test_dismiss_removes_notification(self):
        notification = self.notifications.error(STAFF_ID, "Error", "Something failed")

        response = self.client.delete(reverse("notification_detail", args=[notification.id]))

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(self.notifications.list(STAFF_ID), [])

    def test_dismiss_unknown_notification_returns_404(self):
        response = self.client.delete(reverse("notification_detail", args=["missing"]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
