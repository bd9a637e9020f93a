from enum import Enum


class MemberRole(Enum):
    ADMIN = "Admin"
    STAFF = "Staff"


class MemberStatus(Enum):
    ACTIVE = "active"
    TERMINATED = "terminated"
