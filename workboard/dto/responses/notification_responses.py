from typing import List

from pydantic import BaseModel

from workboard.dto.notification_dto import NotificationDTO


class GetNotificationsResponse(BaseModel):
    notifications: List[NotificationDTO] = []
