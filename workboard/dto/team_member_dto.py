from datetime import datetime

from pydantic import BaseModel, ConfigDict

from workboard.constants.team import MemberRole, MemberStatus


class TeamMemberDTO(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    id: str
    name: str
    email: str
    phone: str | None = None
    role: MemberRole
    status: MemberStatus
    isSystemAccount: bool = False
    createdDate: datetime | None = None
    terminatedDate: datetime | None = None
    terminatedBy: str | None = None
    terminationReason: str | None = None


class CreateTeamMemberDTO(BaseModel):
    id: str
    name: str
    email: str
    phone: str | None = None
    role: MemberRole = MemberRole.STAFF
    isSystemAccount: bool = False


class TerminationResultDTO(BaseModel):
    member: TeamMemberDTO
    releasedTaskCount: int
    releasedTaskIds: list[str] = []
