from datetime import datetime, timezone
from typing import List

from workboard.constants.calendar import (
    GOAL_PREFIX,
    OPEN_TASK_PREFIX,
    OTHER_MEMBER_TASK_PREFIX,
    OWN_TASK_PREFIX,
    UNASSIGNED_ALPHA,
    UNASSIGNED_LABEL,
    CalendarColor,
    CalendarEventType,
)
from workboard.constants.goal import GoalStatus
from workboard.constants.task import TaskPriority, TaskStatus
from workboard.dto.calendar_dto import CalendarEventDTO, CalendarEventPropsDTO
from workboard.dto.responses.calendar_responses import GetCalendarEventsResponse
from workboard.dto.task_filters_dto import TaskFilters
from workboard.models.goal import GoalModel
from workboard.models.task import TaskModel
from workboard.repositories.goal_repository import GoalRepository
from workboard.repositories.task_repository import TaskRepository
from workboard.repositories.team_member_repository import TeamMemberRepository


def _task_colors(task: TaskModel, is_overdue: bool) -> tuple[str, str]:
    if task.status == TaskStatus.COMPLETED.value:
        return CalendarColor.COMPLETED
    if is_overdue:
        return CalendarColor.OVERDUE
    if task.priority == TaskPriority.HIGH.value:
        return CalendarColor.HIGH
    if task.priority == TaskPriority.MEDIUM.value:
        return CalendarColor.MEDIUM
    return CalendarColor.LOW


def _goal_colors(goal: GoalModel, is_overdue: bool) -> tuple[str, str]:
    if goal.status == GoalStatus.COMPLETED.value:
        return CalendarColor.COMPLETED
    if is_overdue:
        return CalendarColor.OVERDUE
    if goal.status == GoalStatus.ACTIVE.value:
        return CalendarColor.GOAL_ACTIVE
    return CalendarColor.GOAL_INACTIVE


def _class_names(is_completed: bool, is_overdue: bool) -> List[str]:
    class_names = ["cursor-pointer", "hover:opacity-80", "transition-opacity"]
    if is_completed:
        class_names.append("opacity-75")
    if is_overdue:
        class_names.append("animate-pulse")
    return class_names


class CalendarService:
    """Read-only calendar view derived from task due dates and goal target dates."""

    @classmethod
    def get_events(
        cls,
        viewer_id: str,
        start: datetime | None = None,
        end: datetime | None = None,
        now: datetime | None = None,
    ) -> GetCalendarEventsResponse:
        now = now or datetime.now(timezone.utc)
        tasks = TaskRepository.list(TaskFilters(due_from=start, due_to=end))
        members_by_id = {
            member.id: member
            for member in TeamMemberRepository.get_by_ids(list({task.assigneeId for task in tasks if task.assigneeId}))
        }

        events = [cls._task_event(task, viewer_id, members_by_id, now) for task in tasks]
        for goal in GoalRepository.list_with_target_date():
            if start and goal.targetDate < start:
                continue
            if end and goal.targetDate > end:
                continue
            events.append(cls._goal_event(goal, now))

        events.sort(key=lambda event: event.start)
        return GetCalendarEventsResponse(events=events, total=len(events))

    @classmethod
    def _task_event(cls, task: TaskModel, viewer_id: str, members_by_id: dict, now: datetime) -> CalendarEventDTO:
        is_completed = task.status == TaskStatus.COMPLETED.value
        is_overdue = task.dueDate < now and not is_completed
        background, border = _task_colors(task, is_overdue)

        if not task.assigneeId:
            background = background + UNASSIGNED_ALPHA
            title = OPEN_TASK_PREFIX + task.title
        elif task.assigneeId == viewer_id:
            title = OWN_TASK_PREFIX + task.title
        else:
            title = OTHER_MEMBER_TASK_PREFIX + task.title

        assignee = members_by_id.get(task.assigneeId) if task.assigneeId else None
        return CalendarEventDTO(
            id=f"task-{task.id}",
            title=title,
            start=task.dueDate,
            backgroundColor=background,
            borderColor=border,
            classNames=_class_names(is_completed, is_overdue),
            extendedProps=CalendarEventPropsDTO(
                type=CalendarEventType.TASK,
                sourceId=str(task.id),
                assignee=assignee.name if assignee else UNASSIGNED_LABEL,
                priority=task.priority,
                status=task.status,
                isOverdue=is_overdue,
                isToday=task.dueDate.date() == now.date(),
            ),
        )

    @classmethod
    def _goal_event(cls, goal: GoalModel, now: datetime) -> CalendarEventDTO:
        is_overdue = goal.targetDate < now and goal.status == GoalStatus.ACTIVE.value
        background, border = _goal_colors(goal, is_overdue)
        return CalendarEventDTO(
            id=f"goal-{goal.id}",
            title=GOAL_PREFIX + goal.title,
            start=goal.targetDate,
            backgroundColor=background,
            borderColor=border,
            classNames=_class_names(goal.status == GoalStatus.COMPLETED.value, is_overdue),
            extendedProps=CalendarEventPropsDTO(
                type=CalendarEventType.GOAL,
                sourceId=str(goal.id),
                status=goal.status,
                progress=goal.progress,
                isOverdue=is_overdue,
                isToday=goal.targetDate.date() == now.date(),
            ),
        )
