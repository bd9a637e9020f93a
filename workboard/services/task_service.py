import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from bson import ObjectId

from workboard.constants.audit import BulkOperation
from workboard.constants.messages import ApiErrors
from workboard.constants.task import TaskStatus
from workboard.dto.audit_actor_dto import AuditActor
from workboard.dto.responses.task_responses import GetTasksResponse
from workboard.dto.task_dto import AssigneeDTO, CreateTaskDTO, TaskDTO
from workboard.dto.task_filters_dto import TaskFilters
from workboard.exceptions.goal_exceptions import GoalNotFoundException
from workboard.exceptions.permission_exceptions import UnclaimNotAllowedError
from workboard.exceptions.task_exceptions import TaskNotFoundException, TaskStateConflictException
from workboard.models.task import TaskModel
from workboard.models.team_member import TeamMemberModel
from workboard.repositories.goal_repository import GoalRepository
from workboard.repositories.task_repository import TaskRepository
from workboard.repositories.team_member_repository import TeamMemberRepository
from workboard.services.audit_service import AuditService
from workboard.services.team_member_service import TeamMemberService

logger = logging.getLogger(__name__)


class TaskService:
    @classmethod
    def prepare_task_dto(cls, task: TaskModel, members_by_id: Dict[str, TeamMemberModel] | None = None) -> TaskDTO:
        assignee = None
        if task.assigneeId:
            if members_by_id is None:
                member = TeamMemberRepository.get_by_id(task.assigneeId)
            else:
                member = members_by_id.get(task.assigneeId)
            if member:
                assignee = AssigneeDTO(id=member.id, name=member.name)

        task_data = task.model_dump(mode="json")
        task_data["assignee"] = assignee
        return TaskDTO(**task_data)

    @classmethod
    def _get_task_model(cls, task_id: str) -> TaskModel:
        task = TaskRepository.get_by_id(task_id)
        if not task:
            raise TaskNotFoundException(task_id)
        return task

    @classmethod
    def _validate_goal(cls, goal_id: str | None) -> ObjectId | None:
        if goal_id is None:
            return None
        if not GoalRepository.get_by_id(goal_id):
            raise GoalNotFoundException(goal_id)
        return ObjectId(goal_id)

    @classmethod
    def get_tasks(cls, filters: TaskFilters) -> GetTasksResponse:
        tasks = TaskRepository.list(filters)
        assignee_ids = {task.assigneeId for task in tasks if task.assigneeId}
        members_by_id = {member.id: member for member in TeamMemberRepository.get_by_ids(list(assignee_ids))}
        task_dtos = [cls.prepare_task_dto(task, members_by_id) for task in tasks]
        return GetTasksResponse(tasks=task_dtos, total=len(task_dtos))

    @classmethod
    def get_task(cls, task_id: str) -> TaskDTO:
        return cls.prepare_task_dto(cls._get_task_model(task_id))

    @classmethod
    def create_task(cls, dto: CreateTaskDTO, actor: AuditActor | None) -> TaskDTO:
        if dto.assigneeId:
            TeamMemberService.get_active_member(dto.assigneeId)

        task = TaskModel(
            title=dto.title,
            description=dto.description,
            assigneeId=dto.assigneeId,
            goalId=cls._validate_goal(dto.goalId),
            dueDate=dto.dueDate,
            status=dto.status,
            priority=dto.priority,
            actionSteps=[step.model_dump() for step in dto.actionSteps],
        )
        if task.status == TaskStatus.COMPLETED.value and actor:
            task.completedBy = actor.id
            task.completedDate = datetime.now(timezone.utc)

        created_task = TaskRepository.create(task)
        AuditService.log_create(actor, TaskModel.collection_name, str(created_task.id), created_task.to_snapshot())
        return cls.prepare_task_dto(created_task)

    @classmethod
    def _build_update(cls, previous: TaskModel, validated_data: Dict[str, Any], actor: AuditActor | None) -> dict:
        update_fields: Dict[str, Any] = {}

        for field_name in ("title", "description", "dueDate", "priority", "status"):
            if field_name in validated_data:
                value = validated_data[field_name]
                update_fields[field_name] = value.value if hasattr(value, "value") else value

        if "assigneeId" in validated_data:
            assignee_id = validated_data["assigneeId"]
            if assignee_id:
                TeamMemberService.get_active_member(assignee_id)
            update_fields["assigneeId"] = assignee_id or None

        if "goalId" in validated_data:
            update_fields["goalId"] = cls._validate_goal(validated_data["goalId"])

        if "actionSteps" in validated_data:
            update_fields["actionSteps"] = [
                {"text": step["text"], "completed": step.get("completed", False)}
                for step in validated_data["actionSteps"]
            ]

        new_status = update_fields.get("status")
        if new_status == TaskStatus.COMPLETED.value and previous.status != TaskStatus.COMPLETED.value:
            update_fields["completedBy"] = actor.id if actor else None
            update_fields["completedDate"] = datetime.now(timezone.utc)
        elif new_status and new_status != TaskStatus.COMPLETED.value and previous.status == TaskStatus.COMPLETED.value:
            update_fields["completedBy"] = None
            update_fields["completedDate"] = None

        return update_fields

    @classmethod
    def _apply_update(
        cls, previous: TaskModel, update_fields: Dict[str, Any], actor: AuditActor | None
    ) -> TaskModel:
        updated_task = TaskRepository.update(str(previous.id), update_fields)
        if not updated_task:
            raise TaskNotFoundException(str(previous.id))

        overlaid = TaskModel.model_validate({**previous.model_dump(by_alias=True), **update_fields})
        AuditService.log_update(
            actor, TaskModel.collection_name, str(previous.id), previous.to_snapshot(), overlaid.to_snapshot()
        )
        return updated_task

    @classmethod
    def update_task(cls, task_id: str, validated_data: Dict[str, Any], actor: AuditActor | None) -> TaskDTO:
        previous = cls._get_task_model(task_id)
        update_fields = cls._build_update(previous, validated_data, actor)
        if not update_fields:
            return cls.prepare_task_dto(previous)

        return cls.prepare_task_dto(cls._apply_update(previous, update_fields, actor))

    @classmethod
    def delete_task(cls, task_id: str, actor: AuditActor | None) -> None:
        task = cls._get_task_model(task_id)
        if not TaskRepository.delete_by_id(task_id):
            raise TaskNotFoundException(task_id)
        AuditService.log_delete(actor, TaskModel.collection_name, task_id, task.to_snapshot())

    @classmethod
    def claim_task(cls, task_id: str, actor: AuditActor) -> TaskDTO:
        """
        Take an open task. The claimer must be an active member at the time of the claim.
        """
        claimer = TeamMemberService.get_active_member(actor.id)
        previous = cls._get_task_model(task_id)

        if previous.status == TaskStatus.COMPLETED.value:
            raise TaskStateConflictException(ApiErrors.TASK_ALREADY_COMPLETED)
        if previous.assigneeId:
            raise TaskStateConflictException(ApiErrors.TASK_ALREADY_ASSIGNED)

        claimed_task = TaskRepository.claim(task_id, claimer.id)
        if not claimed_task:
            raise TaskStateConflictException(ApiErrors.TASK_ALREADY_ASSIGNED)

        AuditService.log_update(
            actor, TaskModel.collection_name, task_id, previous.to_snapshot(), claimed_task.to_snapshot()
        )
        return cls.prepare_task_dto(claimed_task, {claimer.id: claimer})

    @classmethod
    def unclaim_task(cls, task_id: str, actor: AuditActor, is_admin: bool = False) -> TaskDTO:
        previous = cls._get_task_model(task_id)
        if not previous.assigneeId:
            raise TaskStateConflictException(ApiErrors.TASK_NOT_ASSIGNED)
        if previous.assigneeId != actor.id and not is_admin:
            raise UnclaimNotAllowedError(task_id)

        update_fields = {"assigneeId": None, "status": TaskStatus.NOT_STARTED.value}
        return cls.prepare_task_dto(cls._apply_update(previous, update_fields, actor))

    @classmethod
    def mark_overdue_tasks(cls, now: datetime | None = None, actor: AuditActor | None = None) -> List[str]:
        """
        Move open tasks whose due date has passed to the overdue status.

        Returns:
            List[str]: Ids of the tasks that were marked overdue
        """
        now = now or datetime.now(timezone.utc)
        actor = actor or AuditActor.system()
        marked_ids = []

        for task in TaskRepository.find_overdue(now):
            cls._apply_update(task, {"status": TaskStatus.OVERDUE.value, "overdueDate": now}, actor)
            marked_ids.append(str(task.id))

        if marked_ids:
            AuditService.log_bulk_operation(
                actor,
                BulkOperation.MARK_OVERDUE.value,
                TaskModel.collection_name,
                marked_ids,
                {"runAt": now.isoformat()},
            )
        logger.info(f"Marked {len(marked_ids)} task(s) as overdue")
        return marked_ids
