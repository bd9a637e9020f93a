from unittest.mock import Mock, patch

from rest_framework import status
from rest_framework.reverse import reverse

from workboard.constants.messages import ValidationErrors
from workboard.dto.responses.calendar_responses import GetCalendarEventsResponse
from workboard.tests.fixtures.team_member import STAFF_ID, team_models
from workboard.tests.unit.views.base import AuthenticatedViewTestCase


class CalendarEventsViewTests(AuthenticatedViewTestCase):
    member = team_models[1]

    def setUp(self):
        super().setUp()
        self.url = reverse("calendar_events")

    @patch("workboard.views.calendar.CalendarService.get_events")
    def test_events_are_built_for_the_caller(self, mock_get_events: Mock):
        mock_get_events.return_value = GetCalendarEventsResponse()

        response = self.client.get(self.url, {"start": "2024-01-01T00:00:00Z", "end": "2024-01-31T00:00:00Z"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"events": [], "total": 0})
        self.assertEqual(mock_get_events.call_args.args[0], STAFF_ID)
        self.assertEqual(mock_get_events.call_args.kwargs["start"].day, 1)
        self.assertEqual(mock_get_events.call_args.kwargs["end"].day, 31)

    def test_start_after_end_returns_400(self):
        response = self.client.get(self.url, {"start": "2024-02-01T00:00:00Z", "end": "2024-01-01T00:00:00Z"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["errors"][0]["detail"], ValidationErrors.INVALID_DATE_RANGE)
