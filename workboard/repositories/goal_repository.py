from typing import Any, Dict, List

from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument

from workboard.constants.messages import RepositoryErrors
from workboard.models.goal import GoalModel
from workboard.repositories.common.mongo_repository import MongoRepository


class GoalRepository(MongoRepository):
    collection_name = GoalModel.collection_name

    @classmethod
    def create(cls, goal: GoalModel) -> GoalModel:
        goals_collection = cls.get_collection()
        try:
            goal_dict = goal.model_dump(by_alias=True, exclude_none=True)
            insert_result = goals_collection.insert_one(goal_dict)
            goal.id = insert_result.inserted_id
            return goal
        except Exception as e:
            raise ValueError(RepositoryErrors.GOAL_CREATION_FAILED.format(str(e)))

    @classmethod
    def get_by_id(cls, goal_id: str) -> GoalModel | None:
        goals_collection = cls.get_collection()
        goal_data = goals_collection.find_one({"_id": ObjectId(goal_id)})
        return GoalModel(**goal_data) if goal_data else None

    @classmethod
    def list(cls, status: str | None = None, goal_type: str | None = None) -> List[GoalModel]:
        goals_collection = cls.get_collection()
        query = {}
        if status:
            query["status"] = status
        if goal_type:
            query["type"] = goal_type
        cursor = goals_collection.find(query).sort("targetDate", ASCENDING)
        return [GoalModel(**goal) for goal in cursor]

    @classmethod
    def list_with_target_date(cls) -> List[GoalModel]:
        goals_collection = cls.get_collection()
        cursor = goals_collection.find({"targetDate": {"$ne": None}})
        return [GoalModel(**goal) for goal in cursor]

    @classmethod
    def update(cls, goal_id: str, update_data: Dict[str, Any]) -> GoalModel | None:
        goals_collection = cls.get_collection()
        updated_goal = goals_collection.find_one_and_update(
            {"_id": ObjectId(goal_id)},
            {"$set": update_data},
            return_document=ReturnDocument.AFTER,
        )
        return GoalModel(**updated_goal) if updated_goal else None

    @classmethod
    def delete_by_id(cls, goal_id: str) -> bool:
        goals_collection = cls.get_collection()
        result = goals_collection.delete_one({"_id": ObjectId(goal_id)})
        return result.deleted_count > 0
