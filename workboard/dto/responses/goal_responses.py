from typing import List

from pydantic import BaseModel

from workboard.dto.goal_dto import GoalDTO


class GoalResponse(BaseModel):
    statusCode: int = 200
    successMessage: str | None = None
    data: GoalDTO


class GetGoalsResponse(BaseModel):
    goals: List[GoalDTO] = []
    total: int = 0
