from typing import List

from pydantic import BaseModel

from workboard.dto.todo_dto import ToDoDTO, ToDoItemDTO, ToDoListDTO


class ToDoResponse(BaseModel):
    statusCode: int = 200
    successMessage: str | None = None
    data: ToDoDTO


class GetToDosResponse(BaseModel):
    todos: List[ToDoDTO] = []
    total: int = 0


class ToDoListResponse(BaseModel):
    statusCode: int = 200
    successMessage: str | None = None
    data: ToDoListDTO


class GetToDoListsResponse(BaseModel):
    lists: List[ToDoListDTO] = []
    total: int = 0


class ToDoItemResponse(BaseModel):
    statusCode: int = 200
    successMessage: str | None = None
    data: ToDoItemDTO


class GetToDoItemsResponse(BaseModel):
    items: List[ToDoItemDTO] = []
    total: int = 0
