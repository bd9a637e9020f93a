from datetime import datetime, timezone
from typing import Any, Dict, List

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, ReturnDocument

from workboard.constants.messages import RepositoryErrors
from workboard.constants.task import (
    SORT_FIELD_PRIORITY,
    SORT_ORDER_DESC,
    TaskPriority,
    TaskStatus,
)
from workboard.dto.task_filters_dto import TaskFilters
from workboard.models.task import TaskModel
from workboard.repositories.common.mongo_repository import MongoRepository

PRIORITY_RANK = {
    TaskPriority.HIGH.value: 0,
    TaskPriority.MEDIUM.value: 1,
    TaskPriority.LOW.value: 2,
}


class TaskRepository(MongoRepository):
    collection_name = TaskModel.collection_name

    @classmethod
    def _build_query(cls, filters: TaskFilters) -> dict:
        query: Dict[str, Any] = {}
        if filters.open_only:
            query["assigneeId"] = None
            query["status"] = {"$ne": TaskStatus.COMPLETED.value}
        elif filters.assignee_id:
            query["assigneeId"] = filters.assignee_id
        if filters.status:
            query["status"] = filters.status
        if filters.goal_id:
            query["goalId"] = ObjectId(filters.goal_id)
        if filters.due_from or filters.due_to:
            due_window = {}
            if filters.due_from:
                due_window["$gte"] = filters.due_from
            if filters.due_to:
                due_window["$lte"] = filters.due_to
            query["dueDate"] = due_window
        return query

    @classmethod
    def list(cls, filters: TaskFilters) -> List[TaskModel]:
        tasks_collection = cls.get_collection()
        query = cls._build_query(filters)
        direction = DESCENDING if filters.order == SORT_ORDER_DESC else ASCENDING

        if filters.sort_by == SORT_FIELD_PRIORITY:
            tasks = [TaskModel(**task) for task in tasks_collection.find(query)]
            return sorted(
                tasks,
                key=lambda task: PRIORITY_RANK.get(task.priority, len(PRIORITY_RANK)),
                reverse=direction == DESCENDING,
            )

        cursor = tasks_collection.find(query).sort(filters.sort_by, direction)
        return [TaskModel(**task) for task in cursor]

    @classmethod
    def create(cls, task: TaskModel) -> TaskModel:
        tasks_collection = cls.get_collection()
        try:
            task.createdDate = datetime.now(timezone.utc)
            task_dict = task.model_dump(by_alias=True, exclude_none=True)
            insert_result = tasks_collection.insert_one(task_dict)
            task.id = insert_result.inserted_id
            return task
        except Exception as e:
            raise ValueError(RepositoryErrors.TASK_CREATION_FAILED.format(str(e)))

    @classmethod
    def get_by_id(cls, task_id: str) -> TaskModel | None:
        tasks_collection = cls.get_collection()
        task_data = tasks_collection.find_one({"_id": ObjectId(task_id)})
        if task_data:
            return TaskModel(**task_data)
        return None

    @classmethod
    def update(cls, task_id: str, update_data: Dict[str, Any]) -> TaskModel | None:
        tasks_collection = cls.get_collection()
        updated_task = tasks_collection.find_one_and_update(
            {"_id": ObjectId(task_id)},
            {"$set": update_data},
            return_document=ReturnDocument.AFTER,
        )
        if updated_task:
            return TaskModel(**updated_task)
        return None

    @classmethod
    def delete_by_id(cls, task_id: str) -> bool:
        tasks_collection = cls.get_collection()
        result = tasks_collection.delete_one({"_id": ObjectId(task_id)})
        return result.deleted_count > 0

    @classmethod
    def find_open_by_assignee(cls, assignee_id: str) -> List[TaskModel]:
        tasks_collection = cls.get_collection()
        cursor = tasks_collection.find(
            {"assigneeId": assignee_id, "status": {"$ne": TaskStatus.COMPLETED.value}}
        )
        return [TaskModel(**task) for task in cursor]

    @classmethod
    def claim(cls, task_id: str, claimer_id: str) -> TaskModel | None:
        """Assign an unassigned, unfinished task. Returns None when the task is no longer claimable."""
        tasks_collection = cls.get_collection()
        claimed_task = tasks_collection.find_one_and_update(
            {
                "_id": ObjectId(task_id),
                "assigneeId": None,
                "status": {"$ne": TaskStatus.COMPLETED.value},
            },
            {"$set": {"assigneeId": claimer_id, "status": TaskStatus.IN_PROGRESS.value}},
            return_document=ReturnDocument.AFTER,
        )
        if claimed_task:
            return TaskModel(**claimed_task)
        return None

    @classmethod
    def find_overdue(cls, now: datetime) -> List[TaskModel]:
        tasks_collection = cls.get_collection()
        cursor = tasks_collection.find(
            {
                "dueDate": {"$lt": now},
                "status": {"$in": [TaskStatus.NOT_STARTED.value, TaskStatus.IN_PROGRESS.value]},
            }
        )
        return [TaskModel(**task) for task in cursor]

    @classmethod
    def detach_goal(cls, goal_id: str) -> List[str]:
        """Clear `goalId` on every task linked to the goal. Returns the affected task ids."""
        tasks_collection = cls.get_collection()
        goal_object_id = ObjectId(goal_id)
        task_ids = [task["_id"] for task in tasks_collection.find({"goalId": goal_object_id}, {"_id": 1})]
        if task_ids:
            tasks_collection.update_many({"_id": {"$in": task_ids}}, {"$set": {"goalId": None}})
        return [str(task_id) for task_id in task_ids]

    @classmethod
    def count_by_goal(cls, goal_id: str) -> int:
        return cls.get_collection().count_documents({"goalId": ObjectId(goal_id)})
