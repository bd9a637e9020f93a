from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict

from workboard.constants.task import TaskPriority, TaskStatus


class ActionStepDTO(BaseModel):
    text: str
    completed: bool = False


class AssigneeDTO(BaseModel):
    id: str
    name: str


class TaskDTO(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    id: str
    title: str
    description: str = ""
    assigneeId: str | None = None
    assignee: AssigneeDTO | None = None
    goalId: str | None = None
    dueDate: datetime
    status: TaskStatus
    priority: TaskPriority
    actionSteps: List[ActionStepDTO] = []
    completedBy: str | None = None
    completedDate: datetime | None = None
    createdDate: datetime | None = None
    overdueDate: datetime | None = None


class CreateTaskDTO(BaseModel):
    title: str
    description: str = ""
    assigneeId: str | None = None
    goalId: str | None = None
    dueDate: datetime
    status: TaskStatus = TaskStatus.NOT_STARTED
    priority: TaskPriority = TaskPriority.MEDIUM
    actionSteps: List[ActionStepDTO] = []
