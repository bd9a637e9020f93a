from datetime import datetime, timezone
from typing import ClassVar, List

from pydantic import BaseModel, Field

from workboard.constants.task import TaskPriority
from workboard.constants.todo import DEFAULT_LIST_COLOR, ToDoCategory, ToDoListType, ToDoStatus
from workboard.models.common.document import Document
from workboard.models.common.pyobjectid import PyObjectId


class ToDoModel(Document):
    """
    Kanban card on the clinical workbench.
    """

    collection_name: ClassVar[str] = "todos"

    category: ToDoCategory
    title: str
    status: ToDoStatus = ToDoStatus.PENDING
    assigneeId: str | None = None
    patientId: str | None = None
    patientName: str | None = None
    dueDate: datetime | None = None
    createdBy: str
    createdDate: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    completedDate: datetime | None = None


class ToDoListSettingsModel(BaseModel):
    allowReordering: bool = True
    showCompletedItems: bool = True
    autoArchiveCompleted: bool = False
    requireDueDates: bool = False


class ToDoListModel(Document):
    collection_name: ClassVar[str] = "todoLists"

    title: str
    description: str | None = None
    type: ToDoListType = ToDoListType.PERSONAL
    createdBy: str
    createdDate: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    lastModified: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    isArchived: bool = False
    color: str = DEFAULT_LIST_COLOR
    order: int = 0
    sharedWith: List[str] = Field(default_factory=list)
    settings: ToDoListSettingsModel = Field(default_factory=ToDoListSettingsModel)

    def is_visible_to(self, member_id: str) -> bool:
        return (
            self.createdBy == member_id
            or member_id in self.sharedWith
            or self.type == ToDoListType.DEPARTMENT.value
        )


class ToDoItemModel(Document):
    collection_name: ClassVar[str] = "todoItems"

    listId: PyObjectId
    title: str
    description: str | None = None
    completed: bool = False
    completedDate: datetime | None = None
    completedBy: str | None = None
    createdBy: str
    createdDate: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    dueDate: datetime | None = None
    priority: TaskPriority = TaskPriority.MEDIUM
    order: int = 0
    tags: List[str] = Field(default_factory=list)
    assignedTo: str | None = None
