from workboard.constants.messages import ApiErrors


class PermissionDeniedError(Exception):
    """Base permission error"""

    def __init__(self, message: str, resource: str | None = None):
        self.message = message
        self.resource = resource
        super().__init__(self.message)


class AdminRequiredError(PermissionDeniedError):
    """Action restricted to administrators"""

    def __init__(self, action: str, resource: str | None = None):
        self.action = action
        super().__init__(ApiErrors.ADMIN_REQUIRED, resource)


class SystemAccountRequiredError(PermissionDeniedError):
    def __init__(self, resource: str | None = None):
        super().__init__(ApiErrors.SYSTEM_ACCOUNT_REQUIRED, resource)


class UnclaimNotAllowedError(PermissionDeniedError):
    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(ApiErrors.UNCLAIM_NOT_ALLOWED, task_id)


class ToDoListAccessDeniedError(PermissionDeniedError):
    def __init__(self, list_id: str):
        self.list_id = list_id
        super().__init__(ApiErrors.TODO_LIST_ACCESS_DENIED, list_id)
