from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict

from workboard.constants.task import TaskPriority
from workboard.constants.todo import ToDoCategory, ToDoListType, ToDoStatus


class ToDoDTO(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    id: str
    category: ToDoCategory
    title: str
    status: ToDoStatus
    assigneeId: str | None = None
    patientId: str | None = None
    patientName: str | None = None
    dueDate: datetime | None = None
    createdBy: str
    createdDate: datetime
    completedDate: datetime | None = None


class CreateToDoDTO(BaseModel):
    category: ToDoCategory
    title: str
    status: ToDoStatus = ToDoStatus.PENDING
    assigneeId: str | None = None
    patientId: str | None = None
    patientName: str | None = None
    dueDate: datetime | None = None


class ToDoListSettingsDTO(BaseModel):
    allowReordering: bool = True
    showCompletedItems: bool = True
    autoArchiveCompleted: bool = False
    requireDueDates: bool = False


class ToDoListDTO(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    id: str
    title: str
    description: str | None = None
    type: ToDoListType
    createdBy: str
    createdDate: datetime
    lastModified: datetime
    isArchived: bool
    color: str
    order: int
    sharedWith: List[str] = []
    settings: ToDoListSettingsDTO


class CreateToDoListDTO(BaseModel):
    title: str
    description: str | None = None
    type: ToDoListType = ToDoListType.PERSONAL
    color: str | None = None
    order: int = 0
    sharedWith: List[str] = []
    settings: ToDoListSettingsDTO = ToDoListSettingsDTO()


class ToDoItemDTO(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    id: str
    listId: str
    title: str
    description: str | None = None
    completed: bool
    completedDate: datetime | None = None
    completedBy: str | None = None
    createdBy: str
    createdDate: datetime
    dueDate: datetime | None = None
    priority: TaskPriority
    order: int
    tags: List[str] = []
    assignedTo: str | None = None


class CreateToDoItemDTO(BaseModel):
    title: str
    description: str | None = None
    dueDate: datetime | None = None
    priority: TaskPriority = TaskPriority.MEDIUM
    order: int = 0
    tags: List[str] = []
    assignedTo: str | None = None
