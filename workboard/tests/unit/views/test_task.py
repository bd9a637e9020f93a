from unittest.mock import Mock, patch

from rest_framework import status
from rest_framework.reverse import reverse

from workboard.constants.messages import ApiErrors, AppMessages
from workboard.dto.responses.task_responses import GetTasksResponse
from workboard.exceptions.permission_exceptions import UnclaimNotAllowedError
from workboard.exceptions.task_exceptions import TaskNotFoundException, TaskStateConflictException
from workboard.services.task_service import TaskService
from workboard.tests.fixtures.task import task_models
from workboard.tests.fixtures.team_member import ADMIN_ID, STAFF_ID, team_models
from workboard.tests.unit.views.base import AuthenticatedViewTestCase

task_dtos = [TaskService.prepare_task_dto(task, {member.id: member for member in team_models}) for task in task_models]


class TaskListViewTests(AuthenticatedViewTestCase):
    member = team_models[1]

    def setUp(self):
        super().setUp()
        self.url = reverse("tasks")

    @patch("workboard.views.task.TaskService.get_tasks")
    def test_get_tasks_returns_200_with_default_sorting(self, mock_get_tasks: Mock):
        mock_get_tasks.return_value = GetTasksResponse(tasks=task_dtos, total=len(task_dtos))

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertDictEqual(response.data, mock_get_tasks.return_value.model_dump(mode="json"))
        filters = mock_get_tasks.call_args.args[0]
        self.assertEqual((filters.sort_by, filters.order), ("dueDate", "asc"))
        self.assertFalse(filters.open_only)

    @patch("workboard.views.task.TaskService.get_tasks")
    def test_mine_filters_by_caller(self, mock_get_tasks: Mock):
        mock_get_tasks.return_value = GetTasksResponse()

        self.client.get(self.url, {"mine": "true", "assigneeId": ADMIN_ID})

        self.assertEqual(mock_get_tasks.call_args.args[0].assignee_id, STAFF_ID)

    @patch("workboard.views.task.TaskService.get_tasks")
    def test_open_only_is_passed_through(self, mock_get_tasks: Mock):
        mock_get_tasks.return_value = GetTasksResponse()

        self.client.get(self.url, {"openOnly": "true"})

        self.assertTrue(mock_get_tasks.call_args.args[0].open_only)

    def test_get_tasks_returns_400_for_invalid_query_params(self):
        response = self.client.get(self.url, {"status": "Someday", "goalId": "not-an-id"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        sources = [error["source"]["parameter"] for error in response.data["errors"]]
        self.assertCountEqual(sources, ["status", "goalId"])

    @patch("workboard.views.task.TaskService.create_task")
    def test_create_task_returns_201_and_notifies(self, mock_create_task: Mock):
        mock_create_task.return_value = task_dtos[3]
        payload = {"title": "  Update front desk schedule  ", "dueDate": "2024-06-12T09:00:00Z", "priority": "Low"}

        response = self.client.post(self.url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["data"]["id"], task_dtos[3].id)
        dto, actor = mock_create_task.call_args.args
        self.assertEqual(dto.title, "Update front desk schedule")
        self.assertIsNone(dto.assigneeId)
        self.assertEqual(actor.id, STAFF_ID)
        self.assertEqual([item.message for item in self.notifications.list(STAFF_ID)], [AppMessages.TASK_CREATED])

    def test_create_task_without_due_date_returns_400(self):
        response = self.client.post(self.url, {"title": "No due date"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["errors"][0]["source"], {"parameter": "dueDate"})

    def test_unauthenticated_request_returns_401(self):
        self.client.cookies.clear()

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class TaskDetailViewTests(AuthenticatedViewTestCase):
    member = team_models[1]

    def setUp(self):
        super().setUp()
        self.task_id = task_dtos[0].id
        self.url = reverse("task_detail", args=[self.task_id])

    @patch("workboard.views.task.TaskService.get_task")
    def test_get_task_returns_404_when_missing(self, mock_get_task: Mock):
        mock_get_task.side_effect = TaskNotFoundException(self.task_id)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], ApiErrors.TASK_NOT_FOUND.format(self.task_id))

    @patch("workboard.views.task.TaskService.update_task")
    def test_patch_passes_only_given_fields(self, mock_update_task: Mock):
        mock_update_task.return_value = task_dtos[0]

        response = self.client.patch(self.url, {"status": "Completed"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        task_id, validated_data, actor = mock_update_task.call_args.args
        self.assertEqual(task_id, self.task_id)
        self.assertEqual(dict(validated_data), {"status": "Completed"})
        self.assertEqual(actor.id, STAFF_ID)

    @patch("workboard.views.task.TaskService.delete_task")
    def test_delete_returns_204(self, mock_delete_task: Mock):
        response = self.client.delete(self.url)

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        mock_delete_task.assert_called_once()


class ClaimTaskViewTests(AuthenticatedViewTestCase):
    member = team_models[1]

    def setUp(self):
        super().setUp()
        self.task_id = task_dtos[3].id

    @patch("workboard.views.task.TaskService.claim_task")
    def test_claim_returns_claimed_task(self, mock_claim_task: Mock):
        mock_claim_task.return_value = task_dtos[3].model_copy(update={"assigneeId": STAFF_ID})

        response = self.client.post(reverse("claim_task", args=[self.task_id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["successMessage"], AppMessages.TASK_CLAIMED)
        self.assertEqual(response.data["data"]["assigneeId"], STAFF_ID)

    @patch("workboard.views.task.TaskService.claim_task")
    def test_claim_conflict_returns_409_and_error_notification(self, mock_claim_task: Mock):
        mock_claim_task.side_effect = TaskStateConflictException(ApiErrors.TASK_ALREADY_ASSIGNED)

        response = self.client.post(reverse("claim_task", args=[self.task_id]))

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        notifications = self.notifications.list(STAFF_ID)
        self.assertEqual([item.type for item in notifications], ["error"])
        self.assertEqual(notifications[0].message, ApiErrors.TASK_ALREADY_ASSIGNED)

    @patch("workboard.exceptions.exception_handler.AuditService.log_auth")
    @patch("workboard.views.task.TaskService.unclaim_task")
    def test_unclaim_by_other_member_returns_403(self, mock_unclaim_task: Mock, mock_log_auth: Mock):
        mock_unclaim_task.side_effect = UnclaimNotAllowedError(self.task_id)

        response = self.client.post(reverse("unclaim_task", args=[self.task_id]))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(mock_unclaim_task.call_args.kwargs["is_admin"])
        mock_log_auth.assert_called_once()
