from datetime import datetime

from pydantic import BaseModel

from workboard.constants.task import DEFAULT_SORT_FIELD, DEFAULT_SORT_ORDER


class TaskFilters(BaseModel):
    assignee_id: str | None = None
    status: str | None = None
    goal_id: str | None = None
    open_only: bool = False
    due_from: datetime | None = None
    due_to: datetime | None = None
    sort_by: str = DEFAULT_SORT_FIELD
    order: str = DEFAULT_SORT_ORDER
