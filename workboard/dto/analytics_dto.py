from pydantic import BaseModel


class GoalHealthCountsDTO(BaseModel):
    onTarget: int = 0
    ahead: int = 0
    atRisk: int = 0
    behind: int = 0
    overdue: int = 0


class WorkloadEntryDTO(BaseModel):
    memberId: str
    name: str
    openTaskCount: int


class OverallStatsDTO(BaseModel):
    totalGoals: int
    completedGoals: int
    goalCompletionRate: int
    totalTasks: int
    completedTasks: int
    taskCompletionRate: int
    activeMembers: int
    overdueTasks: int


class MemberScorecardDTO(BaseModel):
    memberId: str
    name: str
    totalAssigned: int
    completed: int
    overdue: int
    completionRate: int


class GoalBreakdownDTO(BaseModel):
    goalId: str
    title: str
    progress: int
    linkedTaskCount: int
    completedLinkedTaskCount: int
