from datetime import datetime

from pydantic import BaseModel, ConfigDict

from workboard.constants.notification import NotificationType


class NotificationDTO(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    id: str
    type: NotificationType
    title: str
    message: str
    timestamp: datetime
    read: bool = False
