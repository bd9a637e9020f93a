from workboard.constants.messages import ApiErrors
from workboard.exceptions.common_exceptions import ResourceNotFoundException


class ToDoNotFoundException(ResourceNotFoundException):
    path_param = "todo_id"

    def __init__(self, todo_id: str):
        super().__init__(ApiErrors.TODO_NOT_FOUND.format(todo_id))


class ToDoListNotFoundException(ResourceNotFoundException):
    path_param = "list_id"

    def __init__(self, list_id: str):
        super().__init__(ApiErrors.TODO_LIST_NOT_FOUND.format(list_id))


class ToDoItemNotFoundException(ResourceNotFoundException):
    path_param = "item_id"

    def __init__(self, item_id: str):
        super().__init__(ApiErrors.TODO_ITEM_NOT_FOUND.format(item_id))
