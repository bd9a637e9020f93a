from datetime import datetime, timezone
from typing import Any, Dict, List

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, ReturnDocument

from workboard.constants.messages import RepositoryErrors
from workboard.constants.todo import ToDoListType
from workboard.models.todo import ToDoItemModel, ToDoListModel, ToDoModel
from workboard.repositories.common.mongo_repository import MongoRepository


class ToDoRepository(MongoRepository):
    collection_name = ToDoModel.collection_name

    @classmethod
    def create(cls, todo: ToDoModel) -> ToDoModel:
        collection = cls.get_collection()
        try:
            insert_result = collection.insert_one(todo.model_dump(by_alias=True, exclude_none=True))
            todo.id = insert_result.inserted_id
            return todo
        except Exception as e:
            raise ValueError(RepositoryErrors.TODO_CREATION_FAILED.format(str(e)))

    @classmethod
    def get_by_id(cls, todo_id: str) -> ToDoModel | None:
        todo_data = cls.get_collection().find_one({"_id": ObjectId(todo_id)})
        return ToDoModel(**todo_data) if todo_data else None

    @classmethod
    def list(
        cls, assignee_id: str | None = None, category: str | None = None, status: str | None = None
    ) -> List[ToDoModel]:
        query = {}
        if assignee_id:
            query["assigneeId"] = assignee_id
        if category:
            query["category"] = category
        if status:
            query["status"] = status
        cursor = cls.get_collection().find(query).sort("createdDate", DESCENDING)
        return [ToDoModel(**todo) for todo in cursor]

    @classmethod
    def update(cls, todo_id: str, update_data: Dict[str, Any]) -> ToDoModel | None:
        updated = cls.get_collection().find_one_and_update(
            {"_id": ObjectId(todo_id)}, {"$set": update_data}, return_document=ReturnDocument.AFTER
        )
        return ToDoModel(**updated) if updated else None

    @classmethod
    def delete_by_id(cls, todo_id: str) -> bool:
        return cls.get_collection().delete_one({"_id": ObjectId(todo_id)}).deleted_count > 0


class ToDoListRepository(MongoRepository):
    collection_name = ToDoListModel.collection_name

    @classmethod
    def create(cls, todo_list: ToDoListModel) -> ToDoListModel:
        collection = cls.get_collection()
        insert_result = collection.insert_one(todo_list.model_dump(by_alias=True, exclude_none=True))
        todo_list.id = insert_result.inserted_id
        return todo_list

    @classmethod
    def get_by_id(cls, list_id: str) -> ToDoListModel | None:
        list_data = cls.get_collection().find_one({"_id": ObjectId(list_id)})
        return ToDoListModel(**list_data) if list_data else None

    @classmethod
    def list_visible_to(cls, member_id: str, include_archived: bool = False) -> List[ToDoListModel]:
        query: Dict[str, Any] = {
            "$or": [
                {"createdBy": member_id},
                {"sharedWith": member_id},
                {"type": ToDoListType.DEPARTMENT.value},
            ]
        }
        if not include_archived:
            query["isArchived"] = False
        cursor = cls.get_collection().find(query).sort("order", ASCENDING)
        return [ToDoListModel(**todo_list) for todo_list in cursor]

    @classmethod
    def update(cls, list_id: str, update_data: Dict[str, Any]) -> ToDoListModel | None:
        updated = cls.get_collection().find_one_and_update(
            {"_id": ObjectId(list_id)},
            {"$set": {**update_data, "lastModified": datetime.now(timezone.utc)}},
            return_document=ReturnDocument.AFTER,
        )
        return ToDoListModel(**updated) if updated else None

    @classmethod
    def delete_with_items(cls, list_id: str) -> List[str]:
        """Delete the list and all of its items in one transaction. Returns the deleted item ids."""
        lists_collection = cls.get_collection()
        items_collection = ToDoItemRepository.get_collection()
        list_object_id = ObjectId(list_id)

        with cls.get_client().start_session() as session:
            with session.start_transaction():
                cursor = items_collection.find({"listId": list_object_id}, {"_id": 1}, session=session)
                item_ids = [item["_id"] for item in cursor]
                items_collection.delete_many({"listId": list_object_id}, session=session)
                lists_collection.delete_one({"_id": list_object_id}, session=session)

        return [str(item_id) for item_id in item_ids]


class ToDoItemRepository(MongoRepository):
    collection_name = ToDoItemModel.collection_name

    @classmethod
    def create(cls, item: ToDoItemModel) -> ToDoItemModel:
        collection = cls.get_collection()
        insert_result = collection.insert_one(item.model_dump(by_alias=True, exclude_none=True))
        item.id = insert_result.inserted_id
        return item

    @classmethod
    def get_by_id(cls, item_id: str) -> ToDoItemModel | None:
        item_data = cls.get_collection().find_one({"_id": ObjectId(item_id)})
        return ToDoItemModel(**item_data) if item_data else None

    @classmethod
    def list_by_list_id(cls, list_id: str) -> List[ToDoItemModel]:
        cursor = cls.get_collection().find({"listId": ObjectId(list_id)}).sort("order", ASCENDING)
        return [ToDoItemModel(**item) for item in cursor]

    @classmethod
    def update(cls, item_id: str, update_data: Dict[str, Any]) -> ToDoItemModel | None:
        updated = cls.get_collection().find_one_and_update(
            {"_id": ObjectId(item_id)}, {"$set": update_data}, return_document=ReturnDocument.AFTER
        )
        return ToDoItemModel(**updated) if updated else None

    @classmethod
    def delete_by_id(cls, item_id: str) -> bool:
        return cls.get_collection().delete_one({"_id": ObjectId(item_id)}).deleted_count > 0
