class ResourceNotFoundException(Exception):
    path_param: str | None = None

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class StateConflictException(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)
