from datetime import datetime, timezone
from typing import Any, Dict

from workboard.constants.audit import BulkOperation
from workboard.constants.goal import GoalStatus
from workboard.dto.audit_actor_dto import AuditActor
from workboard.dto.goal_dto import CreateGoalDTO, GoalDTO
from workboard.dto.responses.goal_responses import GetGoalsResponse
from workboard.exceptions.goal_exceptions import GoalNotFoundException
from workboard.models.goal import GoalModel
from workboard.repositories.goal_repository import GoalRepository
from workboard.repositories.task_repository import TaskRepository
from workboard.services.audit_service import AuditService
from workboard.utils.goal_health import classify_goal_health, expected_progress


class GoalService:
    @classmethod
    def prepare_goal_dto(cls, goal: GoalModel, now: datetime | None = None, task_count: int | None = None) -> GoalDTO:
        now = now or datetime.now(timezone.utc)
        health = None
        if goal.status == GoalStatus.ACTIVE.value:
            health = classify_goal_health(goal.progress, goal.createdDate, goal.targetDate, now)

        goal_data = goal.model_dump(mode="json")
        return GoalDTO(
            **goal_data,
            expectedProgress=expected_progress(goal.createdDate, goal.targetDate, now),
            health=health,
            taskCount=task_count,
        )

    @classmethod
    def _get_goal_model(cls, goal_id: str) -> GoalModel:
        goal = GoalRepository.get_by_id(goal_id)
        if not goal:
            raise GoalNotFoundException(goal_id)
        return goal

    @classmethod
    def get_goals(cls, status: str | None = None, goal_type: str | None = None) -> GetGoalsResponse:
        now = datetime.now(timezone.utc)
        goals = [cls.prepare_goal_dto(goal, now) for goal in GoalRepository.list(status, goal_type)]
        return GetGoalsResponse(goals=goals, total=len(goals))

    @classmethod
    def get_goal(cls, goal_id: str) -> GoalDTO:
        goal = cls._get_goal_model(goal_id)
        task_count = TaskRepository.count_by_goal(goal_id)
        return cls.prepare_goal_dto(goal, task_count=task_count)

    @classmethod
    def create_goal(cls, dto: CreateGoalDTO, actor: AuditActor | None) -> GoalDTO:
        goal = GoalRepository.create(GoalModel(**dto.model_dump()))
        AuditService.log_create(actor, GoalModel.collection_name, str(goal.id), goal.to_snapshot())
        return cls.prepare_goal_dto(goal)

    @classmethod
    def update_goal(cls, goal_id: str, validated_data: Dict[str, Any], actor: AuditActor | None) -> GoalDTO:
        previous = cls._get_goal_model(goal_id)
        update_fields = {
            key: value.value if hasattr(value, "value") else value for key, value in validated_data.items()
        }
        if not update_fields:
            return cls.prepare_goal_dto(previous)

        updated = GoalRepository.update(goal_id, update_fields)
        if not updated:
            raise GoalNotFoundException(goal_id)

        AuditService.log_update(
            actor, GoalModel.collection_name, goal_id, previous.to_snapshot(), updated.to_snapshot()
        )
        return cls.prepare_goal_dto(updated)

    @classmethod
    def delete_goal(cls, goal_id: str, actor: AuditActor | None) -> None:
        """Delete the goal and detach it from every task that referenced it."""
        goal = cls._get_goal_model(goal_id)

        detached_task_ids = TaskRepository.detach_goal(goal_id)
        if detached_task_ids:
            AuditService.log_bulk_operation(
                actor,
                BulkOperation.DETACH_GOAL.value,
                TaskRepository.collection_name,
                detached_task_ids,
                {"goalId": goal_id},
            )

        if not GoalRepository.delete_by_id(goal_id):
            raise GoalNotFoundException(goal_id)
        AuditService.log_delete(actor, GoalModel.collection_name, goal_id, goal.to_snapshot())
