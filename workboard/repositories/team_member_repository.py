import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from pymongo import ASCENDING, ReturnDocument

from workboard.constants.task import TaskStatus
from workboard.constants.team import MemberStatus
from workboard.models.team_member import TeamMemberModel
from workboard.repositories.common.mongo_repository import MongoRepository
from workboard.repositories.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class TeamMemberRepository(MongoRepository):
    collection_name = TeamMemberModel.collection_name

    @classmethod
    def create(cls, member: TeamMemberModel) -> TeamMemberModel:
        collection = cls.get_collection()
        member.createdDate = datetime.now(timezone.utc)
        member_dict = member.model_dump(by_alias=True, exclude_none=True)
        collection.insert_one(member_dict)
        return member

    @classmethod
    def get_by_id(cls, member_id: str) -> TeamMemberModel | None:
        collection = cls.get_collection()
        member_data = collection.find_one({"_id": member_id})
        if member_data:
            return TeamMemberModel(**member_data)
        return None

    @classmethod
    def get_by_ids(cls, member_ids: List[str]) -> List[TeamMemberModel]:
        if not member_ids:
            return []
        collection = cls.get_collection()
        return [TeamMemberModel(**doc) for doc in collection.find({"_id": {"$in": list(member_ids)}})]

    @classmethod
    def list(cls, status: str | None = None) -> List[TeamMemberModel]:
        collection = cls.get_collection()
        query = {"status": status} if status else {}
        return [TeamMemberModel(**doc) for doc in collection.find(query).sort("name", ASCENDING)]

    @classmethod
    def update(cls, member_id: str, update_data: Dict[str, Any]) -> TeamMemberModel | None:
        collection = cls.get_collection()
        updated_member = collection.find_one_and_update(
            {"_id": member_id},
            {"$set": update_data},
            return_document=ReturnDocument.AFTER,
        )
        if updated_member:
            return TeamMemberModel(**updated_member)
        return None

    @classmethod
    def delete_by_id(cls, member_id: str) -> bool:
        collection = cls.get_collection()
        result = collection.delete_one({"_id": member_id})
        return result.deleted_count > 0

    @classmethod
    def terminate_with_task_release(
        cls, member_id: str, termination_data: Dict[str, Any], task_ids: List[Any]
    ) -> int:
        """
        Mark the member terminated and return their open tasks to the pool in one transaction.

        Tasks are released only while they are still assigned to the member and not completed.
        Any failure aborts the transaction and propagates; nothing is written in that case.

        Returns:
            int: Number of tasks released
        """
        members_collection = cls.get_collection()
        tasks_collection = TaskRepository.get_collection()
        client = cls.get_client()

        with client.start_session() as session:
            with session.start_transaction():
                members_collection.update_one(
                    {"_id": member_id},
                    {"$set": {**termination_data, "status": MemberStatus.TERMINATED.value}},
                    session=session,
                )
                release_result = tasks_collection.update_many(
                    {
                        "_id": {"$in": task_ids},
                        "assigneeId": member_id,
                        "status": {"$ne": TaskStatus.COMPLETED.value},
                    },
                    {"$set": {"assigneeId": None, "status": TaskStatus.NOT_STARTED.value}},
                    session=session,
                )

        logger.info(f"Terminated member {member_id} and released {release_result.modified_count} task(s)")
        return release_result.modified_count

    @classmethod
    def find_legacy_documents(cls) -> List[Dict[str, Any]]:
        """Documents still keyed by something other than their auth subject id."""
        collection = cls.get_collection()
        return list(collection.find({"uid": {"$exists": True}, "$expr": {"$ne": ["$_id", "$uid"]}}))

    @classmethod
    def rekey(cls, legacy_document: Dict[str, Any], new_id: str) -> None:
        """Move a legacy member document to `new_id` and re-point task assignments at it."""
        members_collection = cls.get_collection()
        tasks_collection = TaskRepository.get_collection()
        client = cls.get_client()
        old_id = legacy_document["_id"]
        replacement = {key: value for key, value in legacy_document.items() if key not in ("_id", "uid")}

        with client.start_session() as session:
            with session.start_transaction():
                members_collection.insert_one({"_id": new_id, **replacement}, session=session)
                members_collection.delete_one({"_id": old_id}, session=session)
                tasks_collection.update_many(
                    {"assigneeId": str(old_id)}, {"$set": {"assigneeId": new_id}}, session=session
                )
