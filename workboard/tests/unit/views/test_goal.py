from datetime import datetime, timezone
from unittest.mock import Mock, patch

from rest_framework import status
from rest_framework.reverse import reverse

from workboard.constants.messages import AppMessages, ValidationErrors
from workboard.dto.responses.goal_responses import GetGoalsResponse
from workboard.exceptions.goal_exceptions import GoalNotFoundException
from workboard.services.goal_service import GoalService
from workboard.tests.fixtures.goal import goal_models
from workboard.tests.fixtures.team_member import ADMIN_ID, team_models
from workboard.tests.unit.views.base import AuthenticatedViewTestCase

now = datetime(2024, 1, 16, tzinfo=timezone.utc)
goal_dtos = [GoalService.prepare_goal_dto(goal, now) for goal in goal_models]


class GoalListViewTests(AuthenticatedViewTestCase):
    member = team_models[0]

    def setUp(self):
        super().setUp()
        self.url = reverse("goals")

    @patch("workboard.views.goal.GoalService.get_goals")
    def test_get_goals_passes_filters(self, mock_get_goals: Mock):
        mock_get_goals.return_value = GetGoalsResponse(goals=goal_dtos[:1], total=1)

        response = self.client.get(self.url, {"status": "active", "type": "quarterly"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["total"], 1)
        self.assertEqual(response.data["goals"][0]["health"], "At Risk")
        mock_get_goals.assert_called_once_with("active", "quarterly")

    def test_get_goals_rejects_unknown_status(self):
        response = self.client.get(self.url, {"status": "someday"})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    @patch("workboard.views.goal.GoalService.create_goal")
    def test_create_goal_returns_201_and_notifies(self, mock_create_goal: Mock):
        mock_create_goal.return_value = goal_dtos[0]

        response = self.client.post(self.url, {"title": "Reduce patient wait time", "progress": 30}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["successMessage"], AppMessages.GOAL_CREATED)
        dto, actor = mock_create_goal.call_args.args
        self.assertEqual(dto.progress, 30)
        self.assertEqual(actor.id, ADMIN_ID)
        self.assertEqual([item.message for item in self.notifications.list(ADMIN_ID)], [AppMessages.GOAL_CREATED])

    def test_create_goal_with_invalid_progress_returns_400(self):
        response = self.client.post(self.url, {"title": "Too ambitious", "progress": 150}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["errors"][0]["detail"], ValidationErrors.INVALID_PROGRESS)


class GoalDetailViewTests(AuthenticatedViewTestCase):
    member = team_models[0]

    def setUp(self):
        super().setUp()
        self.goal_id = str(goal_models[0].id)
        self.url = reverse("goal_detail", args=[self.goal_id])

    @patch("workboard.views.goal.GoalService.get_goal")
    def test_get_goal_returns_404_when_missing(self, mock_get_goal: Mock):
        mock_get_goal.side_effect = GoalNotFoundException(self.goal_id)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_patch_without_fields_returns_400(self):
        response = self.client.patch(self.url, {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["errors"][0]["detail"], ValidationErrors.NO_FIELDS_TO_UPDATE)

    @patch("workboard.views.goal.GoalService.delete_goal")
    def test_delete_goal_returns_204(self, mock_delete_goal: Mock):
        response = self.client.delete(self.url)

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(mock_delete_goal.call_args.args[0], self.goal_id)
