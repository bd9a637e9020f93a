from pydantic import BaseModel

from workboard.constants.audit import SYSTEM_ACTOR_EMAIL, SYSTEM_ACTOR_ID, SYSTEM_ACTOR_NAME


class AuditActor(BaseModel):
    """Who performed an audited action, and from where."""

    id: str
    email: str
    name: str
    session_id: str | None = None
    user_agent: str | None = None
    ip_address: str | None = None

    @classmethod
    def system(cls) -> "AuditActor":
        return cls(id=SYSTEM_ACTOR_ID, email=SYSTEM_ACTOR_EMAIL, name=SYSTEM_ACTOR_NAME)

    @classmethod
    def from_request(cls, request) -> "AuditActor | None":
        if not getattr(request, "user_id", None):
            return None
        return cls(
            id=request.user_id,
            email=getattr(request, "user_email", "") or "",
            name=getattr(request, "user_name", "") or "",
            session_id=getattr(request, "session_id", None),
            user_agent=request.META.get("HTTP_USER_AGENT") or None,
            ip_address=request.META.get("REMOTE_ADDR") or None,
        )
