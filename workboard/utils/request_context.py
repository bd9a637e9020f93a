from rest_framework.exceptions import NotAuthenticated

from workboard.constants.messages import AuthErrorMessages, NotificationTitles
from workboard.constants.team import MemberRole
from workboard.dto.audit_actor_dto import AuditActor
from workboard.exceptions.permission_exceptions import AdminRequiredError, SystemAccountRequiredError
from workboard.services.notification_service import get_notification_registry


def get_request_actor(request) -> AuditActor:
    actor = AuditActor.from_request(request)
    if actor is None:
        raise NotAuthenticated(AuthErrorMessages.AUTHENTICATION_REQUIRED)
    return actor


def is_admin(request) -> bool:
    return getattr(request, "user_role", None) == MemberRole.ADMIN.value


def require_admin(request, action: str) -> None:
    if not is_admin(request):
        raise AdminRequiredError(action, request.path)


def require_system_account(request) -> None:
    if not getattr(request, "is_system_account", False):
        raise SystemAccountRequiredError(request.path)


def notify_success(request, message: str, title: str = NotificationTitles.SUCCESS) -> None:
    member_id = getattr(request, "user_id", None)
    if member_id:
        get_notification_registry().success(member_id, title, message)
