from workboard.constants.messages import ApiErrors
from workboard.exceptions.common_exceptions import ResourceNotFoundException


class GoalNotFoundException(ResourceNotFoundException):
    path_param = "goal_id"

    def __init__(self, goal_id: str | None = None):
        if goal_id:
            message = ApiErrors.GOAL_NOT_FOUND.format(goal_id)
        else:
            message = ApiErrors.GOAL_NOT_FOUND_GENERIC
        super().__init__(message)
