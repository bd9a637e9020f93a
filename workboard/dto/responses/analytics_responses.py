from datetime import datetime
from typing import List

from pydantic import BaseModel

from workboard.dto.analytics_dto import (
    GoalBreakdownDTO,
    GoalHealthCountsDTO,
    MemberScorecardDTO,
    OverallStatsDTO,
    WorkloadEntryDTO,
)


class AnalyticsResponse(BaseModel):
    generatedAt: datetime
    goalHealth: GoalHealthCountsDTO
    workload: List[WorkloadEntryDTO] = []
    overall: OverallStatsDTO
    scorecard: List[MemberScorecardDTO] = []
    goalBreakdown: List[GoalBreakdownDTO] = []
