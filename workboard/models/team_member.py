from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from workboard.constants.team import MemberRole, MemberStatus
from workboard.models.common.document import Document


class TeamMemberModel(Document):
    """
    Model for team members.

    The document id is the authentication subject id of the member's account.
    """

    collection_name: ClassVar[str] = "team"

    id: Optional[str] = Field(default=None, alias="_id")
    name: str = Field(..., min_length=1, max_length=100)
    email: str
    phone: str | None = None
    role: MemberRole = MemberRole.STAFF
    status: MemberStatus = MemberStatus.ACTIVE
    isSystemAccount: bool = False
    createdDate: datetime | None = None
    terminatedDate: datetime | None = None
    terminatedBy: str | None = None
    terminationReason: str | None = None

    @property
    def is_active(self) -> bool:
        return self.status == MemberStatus.ACTIVE.value

    @property
    def is_admin(self) -> bool:
        return self.role == MemberRole.ADMIN.value
