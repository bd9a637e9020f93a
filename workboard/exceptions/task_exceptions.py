from workboard.constants.messages import ApiErrors
from workboard.exceptions.common_exceptions import ResourceNotFoundException, StateConflictException


class TaskNotFoundException(ResourceNotFoundException):
    path_param = "task_id"

    def __init__(self, task_id: str | None = None, message_template: str = ApiErrors.TASK_NOT_FOUND):
        if task_id:
            message = message_template.format(task_id)
        else:
            message = ApiErrors.TASK_NOT_FOUND_GENERIC
        super().__init__(message)


class TaskStateConflictException(StateConflictException):
    pass
