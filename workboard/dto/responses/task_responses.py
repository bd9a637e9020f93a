from typing import List

from pydantic import BaseModel

from workboard.constants.messages import AppMessages
from workboard.dto.task_dto import TaskDTO


class CreateTaskResponse(BaseModel):
    statusCode: int = 201
    successMessage: str = AppMessages.TASK_CREATED
    data: TaskDTO


class UpdateTaskResponse(BaseModel):
    statusCode: int = 200
    successMessage: str = AppMessages.TASK_UPDATED
    data: TaskDTO


class GetTaskByIdResponse(BaseModel):
    data: TaskDTO


class GetTasksResponse(BaseModel):
    tasks: List[TaskDTO] = []
    total: int = 0
