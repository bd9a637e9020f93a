from workboard.constants.messages import ApiErrors
from workboard.exceptions.common_exceptions import ResourceNotFoundException


class NotificationNotFoundException(ResourceNotFoundException):
    path_param = "notification_id"

    def __init__(self, notification_id: str):
        super().__init__(ApiErrors.NOTIFICATION_NOT_FOUND.format(notification_id))
