from datetime import datetime
from typing import ClassVar, List

from pydantic import BaseModel, Field

from workboard.constants.task import TaskPriority, TaskStatus
from workboard.models.common.document import Document
from workboard.models.common.pyobjectid import PyObjectId


class ActionStepModel(BaseModel):
    text: str
    completed: bool = False


class TaskModel(Document):
    collection_name: ClassVar[str] = "tasks"

    title: str
    description: str = ""
    assigneeId: str | None = None
    goalId: PyObjectId | None = None
    dueDate: datetime
    status: TaskStatus = TaskStatus.NOT_STARTED
    priority: TaskPriority = TaskPriority.MEDIUM
    actionSteps: List[ActionStepModel] = Field(default_factory=list)
    completedBy: str | None = None
    completedDate: datetime | None = None
    createdDate: datetime | None = None
    overdueDate: datetime | None = None
