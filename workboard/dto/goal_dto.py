from datetime import datetime

from pydantic import BaseModel, ConfigDict

from workboard.constants.goal import GoalHealth, GoalStatus, GoalType


class GoalDTO(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    id: str
    title: str
    description: str = ""
    type: GoalType
    status: GoalStatus
    createdDate: datetime
    targetDate: datetime | None = None
    lastReviewDate: datetime | None = None
    nextReviewDate: datetime | None = None
    progress: int
    notes: str | None = None
    expectedProgress: int = 0
    health: GoalHealth | None = None
    taskCount: int | None = None


class CreateGoalDTO(BaseModel):
    title: str
    description: str = ""
    type: GoalType = GoalType.MONTHLY
    status: GoalStatus = GoalStatus.ACTIVE
    targetDate: datetime | None = None
    nextReviewDate: datetime | None = None
    progress: int = 0
    notes: str | None = None
