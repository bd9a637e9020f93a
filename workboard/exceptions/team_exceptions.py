from workboard.constants.messages import ApiErrors
from workboard.exceptions.common_exceptions import ResourceNotFoundException, StateConflictException


class TeamMemberNotFoundException(ResourceNotFoundException):
    path_param = "member_id"

    def __init__(self, member_id: str | None = None):
        if member_id:
            message = ApiErrors.MEMBER_NOT_FOUND.format(member_id)
        else:
            message = ApiErrors.MEMBER_NOT_FOUND_GENERIC
        super().__init__(message)


class MemberStateConflictException(StateConflictException):
    pass


class InactiveMemberException(MemberStateConflictException):
    def __init__(self, member_id: str):
        self.member_id = member_id
        super().__init__(ApiErrors.MEMBER_NOT_ACTIVE.format(member_id))
