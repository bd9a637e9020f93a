from datetime import datetime, timezone
from typing import ClassVar

from pydantic import Field

from workboard.constants.goal import GoalStatus, GoalType
from workboard.models.common.document import Document


class GoalModel(Document):
    collection_name: ClassVar[str] = "goals"

    title: str
    description: str = ""
    type: GoalType = GoalType.MONTHLY
    status: GoalStatus = GoalStatus.ACTIVE
    createdDate: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    targetDate: datetime | None = None
    lastReviewDate: datetime | None = None
    nextReviewDate: datetime | None = None
    progress: int = Field(default=0, ge=0, le=100)
    notes: str | None = None
