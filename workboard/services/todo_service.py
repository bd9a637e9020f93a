from datetime import datetime, timezone
from typing import Any, Dict

from bson import ObjectId
from rest_framework.exceptions import ValidationError

from workboard.constants.audit import BulkOperation
from workboard.constants.messages import ValidationErrors
from workboard.constants.todo import DEFAULT_LIST_COLOR, ToDoListType, ToDoStatus
from workboard.dto.audit_actor_dto import AuditActor
from workboard.dto.responses.todo_responses import GetToDoItemsResponse, GetToDoListsResponse, GetToDosResponse
from workboard.dto.todo_dto import (
    CreateToDoDTO,
    CreateToDoItemDTO,
    CreateToDoListDTO,
    ToDoDTO,
    ToDoItemDTO,
    ToDoListDTO,
)
from workboard.exceptions.permission_exceptions import ToDoListAccessDeniedError
from workboard.exceptions.todo_exceptions import (
    ToDoItemNotFoundException,
    ToDoListNotFoundException,
    ToDoNotFoundException,
)
from workboard.models.todo import ToDoItemModel, ToDoListModel, ToDoModel
from workboard.repositories.todo_repository import ToDoItemRepository, ToDoListRepository, ToDoRepository
from workboard.services.audit_service import AuditService


def _plain(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value.value if hasattr(value, "value") else value for key, value in data.items()}


class TodoService:
    """
    Kanban to-dos plus personal, shared and department to-do lists and their items.
    """

    # To-dos

    @classmethod
    def _get_todo_model(cls, todo_id: str) -> ToDoModel:
        todo = ToDoRepository.get_by_id(todo_id)
        if not todo:
            raise ToDoNotFoundException(todo_id)
        return todo

    @classmethod
    def get_todos(
        cls, assignee_id: str | None = None, category: str | None = None, status: str | None = None
    ) -> GetToDosResponse:
        todos = [ToDoDTO(**todo.model_dump(mode="json")) for todo in ToDoRepository.list(assignee_id, category, status)]
        return GetToDosResponse(todos=todos, total=len(todos))

    @classmethod
    def get_todo(cls, todo_id: str) -> ToDoDTO:
        return ToDoDTO(**cls._get_todo_model(todo_id).model_dump(mode="json"))

    @classmethod
    def create_todo(cls, dto: CreateToDoDTO, actor: AuditActor) -> ToDoDTO:
        todo = ToDoModel(**dto.model_dump(), createdBy=actor.id)
        if todo.status == ToDoStatus.COMPLETED.value:
            todo.completedDate = datetime.now(timezone.utc)

        created = ToDoRepository.create(todo)
        AuditService.log_create(actor, ToDoModel.collection_name, str(created.id), created.to_snapshot())
        return ToDoDTO(**created.model_dump(mode="json"))

    @classmethod
    def update_todo(cls, todo_id: str, validated_data: Dict[str, Any], actor: AuditActor) -> ToDoDTO:
        previous = cls._get_todo_model(todo_id)
        update_fields = _plain(validated_data)

        new_status = update_fields.get("status")
        if new_status == ToDoStatus.COMPLETED.value and previous.status != ToDoStatus.COMPLETED.value:
            update_fields["completedDate"] = datetime.now(timezone.utc)
        elif new_status and new_status != ToDoStatus.COMPLETED.value:
            update_fields["completedDate"] = None

        if not update_fields:
            return ToDoDTO(**previous.model_dump(mode="json"))

        updated = ToDoRepository.update(todo_id, update_fields)
        if not updated:
            raise ToDoNotFoundException(todo_id)
        AuditService.log_update(
            actor, ToDoModel.collection_name, todo_id, previous.to_snapshot(), updated.to_snapshot()
        )
        return ToDoDTO(**updated.model_dump(mode="json"))

    @classmethod
    def delete_todo(cls, todo_id: str, actor: AuditActor) -> None:
        todo = cls._get_todo_model(todo_id)
        if not ToDoRepository.delete_by_id(todo_id):
            raise ToDoNotFoundException(todo_id)
        AuditService.log_delete(actor, ToDoModel.collection_name, todo_id, todo.to_snapshot())

    # Lists

    @classmethod
    def _get_visible_list(cls, list_id: str, member_id: str) -> ToDoListModel:
        todo_list = ToDoListRepository.get_by_id(list_id)
        if not todo_list:
            raise ToDoListNotFoundException(list_id)
        if not todo_list.is_visible_to(member_id):
            raise ToDoListAccessDeniedError(list_id)
        return todo_list

    @classmethod
    def _validate_sharing(cls, list_type: str, shared_with: list) -> None:
        if list_type == ToDoListType.SHARED.value and not shared_with:
            raise ValidationError({"sharedWith": [ValidationErrors.SHARED_LIST_REQUIRES_MEMBERS]})

    @classmethod
    def get_lists(cls, member_id: str, include_archived: bool = False) -> GetToDoListsResponse:
        lists = [
            ToDoListDTO(**todo_list.model_dump(mode="json"))
            for todo_list in ToDoListRepository.list_visible_to(member_id, include_archived)
        ]
        return GetToDoListsResponse(lists=lists, total=len(lists))

    @classmethod
    def get_list(cls, list_id: str, member_id: str) -> ToDoListDTO:
        return ToDoListDTO(**cls._get_visible_list(list_id, member_id).model_dump(mode="json"))

    @classmethod
    def create_list(cls, dto: CreateToDoListDTO, actor: AuditActor) -> ToDoListDTO:
        list_data = dto.model_dump()
        list_data["color"] = list_data.get("color") or DEFAULT_LIST_COLOR
        todo_list = ToDoListModel(**list_data, createdBy=actor.id)
        cls._validate_sharing(todo_list.type, todo_list.sharedWith)

        created = ToDoListRepository.create(todo_list)
        AuditService.log_create(actor, ToDoListModel.collection_name, str(created.id), created.to_snapshot())
        return ToDoListDTO(**created.model_dump(mode="json"))

    @classmethod
    def update_list(cls, list_id: str, validated_data: Dict[str, Any], actor: AuditActor) -> ToDoListDTO:
        previous = cls._get_visible_list(list_id, actor.id)
        update_fields = _plain(validated_data)
        cls._validate_sharing(
            update_fields.get("type", previous.type), update_fields.get("sharedWith", previous.sharedWith)
        )

        updated = ToDoListRepository.update(list_id, update_fields)
        if not updated:
            raise ToDoListNotFoundException(list_id)
        AuditService.log_update(
            actor, ToDoListModel.collection_name, list_id, previous.to_snapshot(), updated.to_snapshot()
        )
        return ToDoListDTO(**updated.model_dump(mode="json"))

    @classmethod
    def delete_list(cls, list_id: str, actor: AuditActor) -> None:
        """Delete a list together with all of its items."""
        todo_list = cls._get_visible_list(list_id, actor.id)
        deleted_item_ids = ToDoListRepository.delete_with_items(list_id)

        AuditService.log_delete(actor, ToDoListModel.collection_name, list_id, todo_list.to_snapshot())
        if deleted_item_ids:
            AuditService.log_bulk_operation(
                actor,
                BulkOperation.DELETE_LIST_ITEMS.value,
                ToDoItemModel.collection_name,
                deleted_item_ids,
                {"listId": list_id},
            )

    # Items

    @classmethod
    def _get_item_in_list(cls, list_id: str, item_id: str) -> ToDoItemModel:
        item = ToDoItemRepository.get_by_id(item_id)
        if not item or str(item.listId) != list_id:
            raise ToDoItemNotFoundException(item_id)
        return item

    @classmethod
    def get_items(cls, list_id: str, member_id: str) -> GetToDoItemsResponse:
        todo_list = cls._get_visible_list(list_id, member_id)
        items = ToDoItemRepository.list_by_list_id(list_id)
        if not todo_list.settings.showCompletedItems:
            items = [item for item in items if not item.completed]
        item_dtos = [ToDoItemDTO(**item.model_dump(mode="json")) for item in items]
        return GetToDoItemsResponse(items=item_dtos, total=len(item_dtos))

    @classmethod
    def create_item(cls, list_id: str, dto: CreateToDoItemDTO, actor: AuditActor) -> ToDoItemDTO:
        todo_list = cls._get_visible_list(list_id, actor.id)
        if todo_list.settings.requireDueDates and dto.dueDate is None:
            raise ValidationError({"dueDate": [ValidationErrors.DUE_DATE_REQUIRED]})

        item = ToDoItemModel(**dto.model_dump(), listId=ObjectId(list_id), createdBy=actor.id)
        created = ToDoItemRepository.create(item)
        AuditService.log_create(actor, ToDoItemModel.collection_name, str(created.id), created.to_snapshot())
        return ToDoItemDTO(**created.model_dump(mode="json"))

    @classmethod
    def update_item(cls, list_id: str, item_id: str, validated_data: Dict[str, Any], actor: AuditActor) -> ToDoItemDTO:
        cls._get_visible_list(list_id, actor.id)
        previous = cls._get_item_in_list(list_id, item_id)
        update_fields = _plain(validated_data)

        if "completed" in update_fields and update_fields["completed"] != previous.completed:
            if update_fields["completed"]:
                update_fields["completedBy"] = actor.id
                update_fields["completedDate"] = datetime.now(timezone.utc)
            else:
                update_fields["completedBy"] = None
                update_fields["completedDate"] = None

        if not update_fields:
            return ToDoItemDTO(**previous.model_dump(mode="json"))

        updated = ToDoItemRepository.update(item_id, update_fields)
        if not updated:
            raise ToDoItemNotFoundException(item_id)
        AuditService.log_update(
            actor, ToDoItemModel.collection_name, item_id, previous.to_snapshot(), updated.to_snapshot()
        )
        return ToDoItemDTO(**updated.model_dump(mode="json"))

    @classmethod
    def delete_item(cls, list_id: str, item_id: str, actor: AuditActor) -> None:
        cls._get_visible_list(list_id, actor.id)
        item = cls._get_item_in_list(list_id, item_id)
        if not ToDoItemRepository.delete_by_id(item_id):
            raise ToDoItemNotFoundException(item_id)
        AuditService.log_delete(actor, ToDoItemModel.collection_name, item_id, item.to_snapshot())
