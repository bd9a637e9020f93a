import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

from workboard.constants.audit import BulkOperation
from workboard.constants.messages import ApiErrors
from workboard.constants.team import MemberStatus
from workboard.dto.audit_actor_dto import AuditActor
from workboard.dto.responses.team_member_responses import GetTeamMembersResponse
from workboard.dto.team_member_dto import CreateTeamMemberDTO, TeamMemberDTO, TerminationResultDTO
from workboard.exceptions.team_exceptions import (
    InactiveMemberException,
    MemberStateConflictException,
    TeamMemberNotFoundException,
)
from workboard.models.team_member import TeamMemberModel
from workboard.repositories.task_repository import TaskRepository
from workboard.repositories.team_member_repository import TeamMemberRepository
from workboard.services.audit_service import AuditService

logger = logging.getLogger(__name__)


@dataclass
class TerminationOutcome:
    previous: TeamMemberModel
    released_count: int
    released_task_ids: List[str] = field(default_factory=list)


class TeamMemberService:
    @classmethod
    def prepare_member_dto(cls, member: TeamMemberModel) -> TeamMemberDTO:
        return TeamMemberDTO(**member.model_dump())

    @classmethod
    def get_member_model(cls, member_id: str) -> TeamMemberModel:
        member = TeamMemberRepository.get_by_id(member_id)
        if not member:
            raise TeamMemberNotFoundException(member_id)
        return member

    @classmethod
    def get_active_member(cls, member_id: str) -> TeamMemberModel:
        member = cls.get_member_model(member_id)
        if not member.is_active:
            raise InactiveMemberException(member_id)
        return member

    @classmethod
    def get_member(cls, member_id: str) -> TeamMemberDTO:
        return cls.prepare_member_dto(cls.get_member_model(member_id))

    @classmethod
    def get_members(cls, status: str | None = None) -> GetTeamMembersResponse:
        members = [cls.prepare_member_dto(member) for member in TeamMemberRepository.list(status)]
        return GetTeamMembersResponse(members=members, total=len(members))

    @classmethod
    def create_member(cls, dto: CreateTeamMemberDTO, actor: AuditActor | None) -> TeamMemberDTO:
        if TeamMemberRepository.get_by_id(dto.id):
            raise MemberStateConflictException(ApiErrors.MEMBER_ALREADY_EXISTS.format(dto.id))

        member = TeamMemberRepository.create(TeamMemberModel(**dto.model_dump()))
        AuditService.log_create(actor, TeamMemberModel.collection_name, member.id, member.to_snapshot())
        return cls.prepare_member_dto(member)

    @classmethod
    def update_member(cls, member_id: str, update_data: Dict[str, Any], actor: AuditActor | None) -> TeamMemberDTO:
        previous = cls.get_member_model(member_id)
        updated = TeamMemberRepository.update(member_id, update_data)
        if not updated:
            raise TeamMemberNotFoundException(member_id)

        AuditService.log_update(
            actor, TeamMemberModel.collection_name, member_id, previous.to_snapshot(), updated.to_snapshot()
        )
        return cls.prepare_member_dto(updated)

    @classmethod
    def delete_member(cls, member_id: str, actor: AuditActor | None) -> None:
        member = cls.get_member_model(member_id)
        if not TeamMemberRepository.delete_by_id(member_id):
            raise TeamMemberNotFoundException(member_id)
        AuditService.log_delete(actor, TeamMemberModel.collection_name, member_id, member.to_snapshot())

    @classmethod
    def terminate_member(cls, member_id: str, terminated_by: str | None = None, reason: str | None = None) -> int:
        """
        Terminate a member and return their unfinished tasks to the open pool.

        The member update and the task release are applied in one transaction; if it fails
        the error propagates and neither the member nor any task has changed, so the call can
        simply be retried. No authorization is checked here.

        Returns:
            int: Number of tasks released
        """
        return cls._terminate(member_id, terminated_by, reason).released_count

    @classmethod
    def _terminate(cls, member_id: str, terminated_by: str | None, reason: str | None) -> TerminationOutcome:
        member = cls.get_member_model(member_id)
        if member.status == MemberStatus.TERMINATED.value:
            raise MemberStateConflictException(ApiErrors.MEMBER_ALREADY_TERMINATED)

        termination_data = {
            "terminatedDate": datetime.now(timezone.utc),
            "terminatedBy": terminated_by,
            "terminationReason": reason,
        }
        open_tasks = TaskRepository.find_open_by_assignee(member_id)

        if not open_tasks:
            TeamMemberRepository.update(member_id, {**termination_data, "status": MemberStatus.TERMINATED.value})
            logger.info(f"Terminated member {member_id} with no open tasks")
            return TerminationOutcome(previous=member, released_count=0)

        task_ids = [task.id for task in open_tasks]
        released_count = TeamMemberRepository.terminate_with_task_release(member_id, termination_data, task_ids)
        return TerminationOutcome(
            previous=member,
            released_count=released_count,
            released_task_ids=[str(task_id) for task_id in task_ids],
        )

    @classmethod
    def terminate(cls, member_id: str, actor: AuditActor, reason: str | None = None) -> TerminationResultDTO:
        """Terminate on behalf of `actor` and record the member update and the task release."""
        if actor.id == member_id:
            raise MemberStateConflictException(ApiErrors.CANNOT_TERMINATE_SELF)

        outcome = cls._terminate(member_id, actor.id, reason)
        updated = cls.get_member_model(member_id)

        AuditService.log_update(
            actor,
            TeamMemberModel.collection_name,
            member_id,
            outcome.previous.to_snapshot(),
            updated.to_snapshot(),
        )
        if outcome.released_task_ids:
            AuditService.log_bulk_operation(
                actor,
                BulkOperation.RELEASE_TASKS.value,
                TaskRepository.collection_name,
                outcome.released_task_ids,
                {"memberId": member_id, "releasedCount": outcome.released_count, "reason": reason},
            )

        return TerminationResultDTO(
            member=cls.prepare_member_dto(updated),
            releasedTaskCount=outcome.released_count,
            releasedTaskIds=outcome.released_task_ids,
        )

    @classmethod
    def reactivate_member(cls, member_id: str, actor: AuditActor | None = None) -> TeamMemberDTO:
        """
        Set the member back to active. Tasks released at termination stay in the open pool,
        and the termination fields are left as they were.
        """
        previous = cls.get_member_model(member_id)
        if previous.is_active:
            raise MemberStateConflictException(ApiErrors.MEMBER_ALREADY_ACTIVE)

        updated = TeamMemberRepository.update(member_id, {"status": MemberStatus.ACTIVE.value})
        if not updated:
            raise TeamMemberNotFoundException(member_id)

        AuditService.log_update(
            actor, TeamMemberModel.collection_name, member_id, previous.to_snapshot(), updated.to_snapshot()
        )
        return cls.prepare_member_dto(updated)
