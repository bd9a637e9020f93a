from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict

from workboard.constants.calendar import CalendarEventType


class CalendarEventPropsDTO(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    type: CalendarEventType
    sourceId: str
    assignee: str | None = None
    priority: str | None = None
    status: str
    progress: int | None = None
    isOverdue: bool = False
    isToday: bool = False


class CalendarEventDTO(BaseModel):
    id: str
    title: str
    start: datetime
    allDay: bool = True
    backgroundColor: str
    borderColor: str
    textColor: str = "white"
    classNames: List[str] = []
    extendedProps: CalendarEventPropsDTO
