from datetime import datetime, timezone
from unittest import TestCase
from unittest.mock import Mock, patch

from workboard.constants.goal import GoalHealth
from workboard.exceptions.goal_exceptions import GoalNotFoundException
from workboard.models.goal import GoalModel
from workboard.services.goal_service import GoalService
from workboard.tests.fixtures.goal import goal_models


class GoalServiceTests(TestCase):
    def setUp(self):
        self.active_goal = goal_models[0]
        self.completed_goal = goal_models[1]
        self.goal_id = str(self.active_goal.id)

    def test_prepare_goal_dto_classifies_active_goal(self):
        now = datetime(2024, 1, 16, tzinfo=timezone.utc)

        goal_dto = GoalService.prepare_goal_dto(self.active_goal, now)

        self.assertEqual(goal_dto.expectedProgress, 50)
        self.assertEqual(goal_dto.health, GoalHealth.AT_RISK.value)

    def test_prepare_goal_dto_skips_health_for_inactive_goal(self):
        goal_dto = GoalService.prepare_goal_dto(self.completed_goal, datetime(2024, 6, 1, tzinfo=timezone.utc))

        self.assertIsNone(goal_dto.health)

    @patch("workboard.services.goal_service.GoalRepository.get_by_id")
    def test_get_goal_raises_when_missing(self, mock_get_by_id: Mock):
        mock_get_by_id.return_value = None

        with self.assertRaises(GoalNotFoundException):
            GoalService.get_goal(self.goal_id)

    @patch("workboard.services.goal_service.TaskRepository.count_by_goal")
    @patch("workboard.services.goal_service.GoalRepository.get_by_id")
    def test_get_goal_counts_linked_tasks(self, mock_get_by_id: Mock, mock_count_by_goal: Mock):
        mock_get_by_id.return_value = self.active_goal
        mock_count_by_goal.return_value = 2

        goal_dto = GoalService.get_goal(self.goal_id)

        self.assertEqual(goal_dto.taskCount, 2)
        mock_count_by_goal.assert_called_once_with(self.goal_id)

    @patch("workboard.services.goal_service.AuditService.log_update")
    @patch("workboard.services.goal_service.GoalRepository.update")
    @patch("workboard.services.goal_service.GoalRepository.get_by_id")
    def test_update_goal_audits_previous_and_new_state(
        self, mock_get_by_id: Mock, mock_update: Mock, mock_log_update: Mock
    ):
        updated = self.active_goal.model_copy(update={"progress": 60})
        mock_get_by_id.return_value = self.active_goal
        mock_update.return_value = updated

        goal_dto = GoalService.update_goal(self.goal_id, {"progress": 60}, None)

        mock_update.assert_called_once_with(self.goal_id, {"progress": 60})
        self.assertEqual(goal_dto.progress, 60)
        previous_snapshot, new_snapshot = mock_log_update.call_args.args[3:5]
        self.assertEqual(previous_snapshot["progress"], 30)
        self.assertEqual(new_snapshot["progress"], 60)

    @patch("workboard.services.goal_service.GoalRepository.update")
    @patch("workboard.services.goal_service.GoalRepository.get_by_id")
    def test_update_goal_without_changes_skips_write(self, mock_get_by_id: Mock, mock_update: Mock):
        mock_get_by_id.return_value = self.active_goal

        GoalService.update_goal(self.goal_id, {}, None)

        mock_update.assert_not_called()

    @patch("workboard.services.goal_service.AuditService.log_delete")
    @patch("workboard.services.goal_service.AuditService.log_bulk_operation")
    @patch("workboard.services.goal_service.GoalRepository.delete_by_id")
    @patch("workboard.services.goal_service.TaskRepository.detach_goal")
    @patch("workboard.services.goal_service.GoalRepository.get_by_id")
    def test_delete_goal_detaches_linked_tasks(
        self,
        mock_get_by_id: Mock,
        mock_detach_goal: Mock,
        mock_delete: Mock,
        mock_log_bulk: Mock,
        mock_log_delete: Mock,
    ):
        mock_get_by_id.return_value = self.active_goal
        mock_detach_goal.return_value = ["672f7c5b775ee9f4471ff1dd"]
        mock_delete.return_value = True

        GoalService.delete_goal(self.goal_id, None)

        mock_detach_goal.assert_called_once_with(self.goal_id)
        self.assertEqual(mock_log_bulk.call_args.args[3], ["672f7c5b775ee9f4471ff1dd"])
        mock_log_delete.assert_called_once_with(
            None, GoalModel.collection_name, self.goal_id, self.active_goal.to_snapshot()
        )
