import logging
import math
from collections import Counter
from datetime import datetime, timezone
from typing import List

from workboard.constants.goal import GoalHealth, GoalStatus
from workboard.constants.task import TaskStatus
from workboard.constants.team import MemberStatus
from workboard.dto.analytics_dto import (
    GoalBreakdownDTO,
    GoalHealthCountsDTO,
    MemberScorecardDTO,
    OverallStatsDTO,
    WorkloadEntryDTO,
)
from workboard.dto.responses.analytics_responses import AnalyticsResponse
from workboard.dto.task_filters_dto import TaskFilters
from workboard.models.goal import GoalModel
from workboard.models.task import TaskModel
from workboard.models.team_member import TeamMemberModel
from workboard.repositories.goal_repository import GoalRepository
from workboard.repositories.task_repository import TaskRepository
from workboard.repositories.team_member_repository import TeamMemberRepository
from workboard.utils.goal_health import classify_goal_health

logger = logging.getLogger(__name__)


def percentage(part: int, whole: int) -> int:
    """Whole-number percentage rounded half up; 0 when there is nothing to divide by."""
    if whole <= 0:
        return 0
    return math.floor(part / whole * 100 + 0.5)


def _is_completed(task: TaskModel) -> bool:
    return task.status == TaskStatus.COMPLETED.value


def _is_overdue(task: TaskModel, now: datetime) -> bool:
    return not _is_completed(task) and task.dueDate < now


class AnalyticsService:
    """
    Dashboard figures derived from a single read of goals, tasks and active members.

    Nothing here is stored; every call recomputes from the current documents.
    """

    @classmethod
    def get_analytics(cls, now: datetime | None = None) -> AnalyticsResponse:
        now = now or datetime.now(timezone.utc)
        goals = GoalRepository.list()
        tasks = TaskRepository.list(TaskFilters())
        active_members = TeamMemberRepository.list(MemberStatus.ACTIVE.value)
        logger.debug(f"Computing analytics over {len(goals)} goal(s), {len(tasks)} task(s)")

        return AnalyticsResponse(
            generatedAt=now,
            goalHealth=cls.count_goal_health(goals, now),
            workload=cls.team_workload(active_members, tasks),
            overall=cls.overall_stats(goals, tasks, active_members, now),
            scorecard=cls.scorecard(active_members, tasks, now),
            goalBreakdown=cls.goal_breakdown(goals, tasks),
        )

    @classmethod
    def count_goal_health(cls, goals: List[GoalModel], now: datetime) -> GoalHealthCountsDTO:
        counts = Counter(
            classify_goal_health(goal.progress, goal.createdDate, goal.targetDate, now)
            for goal in goals
            if goal.status == GoalStatus.ACTIVE.value and goal.targetDate
        )
        return GoalHealthCountsDTO(
            onTarget=counts[GoalHealth.ON_TARGET],
            ahead=counts[GoalHealth.AHEAD],
            atRisk=counts[GoalHealth.AT_RISK],
            behind=counts[GoalHealth.BEHIND],
            overdue=counts[GoalHealth.OVERDUE],
        )

    @classmethod
    def team_workload(cls, active_members: List[TeamMemberModel], tasks: List[TaskModel]) -> List[WorkloadEntryDTO]:
        """Open tasks per active member, busiest first."""
        open_counts = Counter(task.assigneeId for task in tasks if task.assigneeId and not _is_completed(task))
        workload = [
            WorkloadEntryDTO(memberId=member.id, name=member.name, openTaskCount=open_counts[member.id])
            for member in active_members
        ]
        return sorted(workload, key=lambda entry: entry.openTaskCount, reverse=True)

    @classmethod
    def overall_stats(
        cls, goals: List[GoalModel], tasks: List[TaskModel], active_members: List[TeamMemberModel], now: datetime
    ) -> OverallStatsDTO:
        completed_goals = sum(1 for goal in goals if goal.status == GoalStatus.COMPLETED.value)
        completed_tasks = sum(1 for task in tasks if _is_completed(task))
        return OverallStatsDTO(
            totalGoals=len(goals),
            completedGoals=completed_goals,
            goalCompletionRate=percentage(completed_goals, len(goals)),
            totalTasks=len(tasks),
            completedTasks=completed_tasks,
            taskCompletionRate=percentage(completed_tasks, len(tasks)),
            activeMembers=len(active_members),
            overdueTasks=sum(1 for task in tasks if _is_overdue(task, now)),
        )

    @classmethod
    def scorecard(
        cls, active_members: List[TeamMemberModel], tasks: List[TaskModel], now: datetime
    ) -> List[MemberScorecardDTO]:
        """Per-member completion figures, highest completion rate first."""
        cards = []
        for member in active_members:
            assigned = [task for task in tasks if task.assigneeId == member.id]
            completed = sum(1 for task in assigned if _is_completed(task))
            cards.append(
                MemberScorecardDTO(
                    memberId=member.id,
                    name=member.name,
                    totalAssigned=len(assigned),
                    completed=completed,
                    overdue=sum(1 for task in assigned if _is_overdue(task, now)),
                    completionRate=percentage(completed, len(assigned)),
                )
            )
        return sorted(cards, key=lambda card: card.completionRate, reverse=True)

    @classmethod
    def goal_breakdown(cls, goals: List[GoalModel], tasks: List[TaskModel]) -> List[GoalBreakdownDTO]:
        linked = Counter(str(task.goalId) for task in tasks if task.goalId)
        completed_linked = Counter(str(task.goalId) for task in tasks if task.goalId and _is_completed(task))
        return [
            GoalBreakdownDTO(
                goalId=str(goal.id),
                title=goal.title,
                progress=goal.progress,
                linkedTaskCount=linked[str(goal.id)],
                completedLinkedTaskCount=completed_linked[str(goal.id)],
            )
            for goal in goals
        ]
