from typing import List

from pydantic import BaseModel

from workboard.dto.team_member_dto import TeamMemberDTO, TerminationResultDTO


class TeamMemberResponse(BaseModel):
    statusCode: int = 200
    successMessage: str | None = None
    data: TeamMemberDTO


class GetTeamMembersResponse(BaseModel):
    members: List[TeamMemberDTO] = []
    total: int = 0


class TerminateMemberResponse(BaseModel):
    statusCode: int = 200
    successMessage: str
    data: TerminationResultDTO
