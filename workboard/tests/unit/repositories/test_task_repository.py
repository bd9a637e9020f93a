import copy
from datetime import datetime, timezone
from unittest import TestCase
from unittest.mock import MagicMock, patch

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.collection import Collection

from workboard.constants.messages import RepositoryErrors
from workboard.constants.task import TaskStatus
from workboard.dto.task_filters_dto import TaskFilters
from workboard.models.task import TaskModel
from workboard.repositories.task_repository import TaskRepository
from workboard.tests.fixtures.task import tasks_db_data
from workboard.tests.fixtures.team_member import STAFF_ID


class TaskRepositoryTests(TestCase):
    def setUp(self):
        self.task_data = copy.deepcopy(tasks_db_data)
        self.task_id = str(self.task_data[0]["_id"])

        self.patcher_get_collection = patch("workboard.repositories.task_repository.TaskRepository.get_collection")
        self.mock_get_collection = self.patcher_get_collection.start()
        self.mock_collection = MagicMock(spec=Collection)
        self.mock_get_collection.return_value = self.mock_collection

    def tearDown(self):
        self.patcher_get_collection.stop()

    def test_list_sorts_by_due_date_by_default(self):
        self.mock_collection.find.return_value.sort.return_value = self.task_data

        result = TaskRepository.list(TaskFilters())

        self.assertEqual(len(result), len(self.task_data))
        self.assertTrue(all(isinstance(task, TaskModel) for task in result))
        self.mock_collection.find.assert_called_once_with({})
        self.mock_collection.find.return_value.sort.assert_called_once_with("dueDate", ASCENDING)

    def test_list_builds_query_from_filters(self):
        self.mock_collection.find.return_value.sort.return_value = []
        goal_id = "6650a1f2c3d4e5f601234567"
        due_from = datetime(2024, 6, 1, tzinfo=timezone.utc)
        due_to = datetime(2024, 6, 30, tzinfo=timezone.utc)

        TaskRepository.list(
            TaskFilters(
                assignee_id=STAFF_ID,
                status="In Progress",
                goal_id=goal_id,
                due_from=due_from,
                due_to=due_to,
                sort_by="createdDate",
                order="desc",
            )
        )

        self.mock_collection.find.assert_called_once_with(
            {
                "assigneeId": STAFF_ID,
                "status": "In Progress",
                "goalId": ObjectId(goal_id),
                "dueDate": {"$gte": due_from, "$lte": due_to},
            }
        )
        self.mock_collection.find.return_value.sort.assert_called_once_with("createdDate", DESCENDING)

    def test_open_pool_query_ignores_assignee_filter(self):
        self.mock_collection.find.return_value.sort.return_value = []

        TaskRepository.list(TaskFilters(open_only=True, assignee_id=STAFF_ID))

        self.mock_collection.find.assert_called_once_with(
            {"assigneeId": None, "status": {"$ne": TaskStatus.COMPLETED.value}}
        )

    def test_list_sorts_by_priority_rank(self):
        self.mock_collection.find.return_value = self.task_data

        result = TaskRepository.list(TaskFilters(sort_by="priority"))

        self.assertEqual([task.priority for task in result], ["High", "Medium", "Low", "Low"])

    def test_create_inserts_document_and_sets_id(self):
        inserted_id = ObjectId()
        self.mock_collection.insert_one.return_value = MagicMock(inserted_id=inserted_id)
        task = TaskModel(title="New task", dueDate=datetime(2024, 7, 1, tzinfo=timezone.utc))

        created = TaskRepository.create(task)

        self.assertEqual(created.id, inserted_id)
        self.assertIsNotNone(created.createdDate)
        inserted = self.mock_collection.insert_one.call_args.args[0]
        self.assertNotIn("_id", inserted)
        self.assertNotIn("assigneeId", inserted)

    def test_create_wraps_insert_failure(self):
        self.mock_collection.insert_one.side_effect = Exception("connection reset")
        task = TaskModel(title="New task", dueDate=datetime(2024, 7, 1, tzinfo=timezone.utc))

        with self.assertRaises(ValueError) as context:
            TaskRepository.create(task)

        self.assertEqual(str(context.exception), RepositoryErrors.TASK_CREATION_FAILED.format("connection reset"))

    def test_get_by_id_returns_none_when_missing(self):
        self.mock_collection.find_one.return_value = None

        self.assertIsNone(TaskRepository.get_by_id(self.task_id))
        self.mock_collection.find_one.assert_called_once_with({"_id": ObjectId(self.task_id)})

    def test_update_sets_fields_and_returns_new_document(self):
        self.mock_collection.find_one_and_update.return_value = {**self.task_data[0], "title": "Renamed"}

        result = TaskRepository.update(self.task_id, {"title": "Renamed"})

        self.assertEqual(result.title, "Renamed")
        self.mock_collection.find_one_and_update.assert_called_once_with(
            {"_id": ObjectId(self.task_id)},
            {"$set": {"title": "Renamed"}},
            return_document=ReturnDocument.AFTER,
        )

    def test_claim_only_matches_unassigned_open_task(self):
        self.mock_collection.find_one_and_update.return_value = None

        result = TaskRepository.claim(self.task_id, STAFF_ID)

        self.assertIsNone(result)
        self.mock_collection.find_one_and_update.assert_called_once_with(
            {
                "_id": ObjectId(self.task_id),
                "assigneeId": None,
                "status": {"$ne": TaskStatus.COMPLETED.value},
            },
            {"$set": {"assigneeId": STAFF_ID, "status": TaskStatus.IN_PROGRESS.value}},
            return_document=ReturnDocument.AFTER,
        )

    def test_find_open_by_assignee_excludes_completed(self):
        self.mock_collection.find.return_value = self.task_data[:2]

        result = TaskRepository.find_open_by_assignee(STAFF_ID)

        self.assertEqual(len(result), 2)
        self.mock_collection.find.assert_called_once_with(
            {"assigneeId": STAFF_ID, "status": {"$ne": TaskStatus.COMPLETED.value}}
        )

    def test_detach_goal_clears_goal_on_linked_tasks(self):
        goal_id = "6650a1f2c3d4e5f601234567"
        linked_ids = [self.task_data[0]["_id"], self.task_data[1]["_id"]]
        self.mock_collection.find.return_value = [{"_id": task_id} for task_id in linked_ids]

        result = TaskRepository.detach_goal(goal_id)

        self.assertEqual(result, [str(task_id) for task_id in linked_ids])
        self.mock_collection.update_many.assert_called_once_with(
            {"_id": {"$in": linked_ids}}, {"$set": {"goalId": None}}
        )

    def test_detach_goal_without_linked_tasks_writes_nothing(self):
        self.mock_collection.find.return_value = []

        self.assertEqual(TaskRepository.detach_goal("6650a1f2c3d4e5f601234567"), [])
        self.mock_collection.update_many.assert_not_called()

    def test_count_by_goal(self):
        goal_id = "6650a1f2c3d4e5f601234567"
        self.mock_collection.count_documents.return_value = 3

        self.assertEqual(TaskRepository.count_by_goal(goal_id), 3)
        self.mock_collection.count_documents.assert_called_once_with({"goalId": ObjectId(goal_id)})
