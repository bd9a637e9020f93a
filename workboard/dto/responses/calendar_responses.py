from typing import List

from pydantic import BaseModel

from workboard.dto.calendar_dto import CalendarEventDTO


class GetCalendarEventsResponse(BaseModel):
    events: List[CalendarEventDTO] = []
    total: int = 0
