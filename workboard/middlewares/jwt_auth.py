import logging

from django.conf import settings
from django.http import JsonResponse
from rest_framework import status

from workboard.constants.messages import ApiErrors, AuthErrorMessages
from workboard.dto.responses.error_response import ApiErrorDetail, ApiErrorResponse
from workboard.exceptions.auth_exceptions import (
    AccountTerminatedError,
    BaseAuthException,
    ProfileNotFoundError,
    RefreshTokenExpiredError,
    TokenExpiredError,
    TokenInvalidError,
    TokenMissingError,
)
from workboard.repositories.team_member_repository import TeamMemberRepository
from workboard.utils.auth_errors import translate_auth_error
from workboard.utils.jwt_utils import generate_access_token, validate_access_token, validate_refresh_token

logger = logging.getLogger(__name__)


class JWTAuthenticationMiddleware:
    def __init__(self, get_response) -> None:
        self.get_response = get_response

    def __call__(self, request):
        if self._is_public_path(request.path):
            return self.get_response(request)

        try:
            self._authenticate(request)
        except BaseAuthException as e:
            return self._handle_auth_error(e)

        response = self.get_response(request)
        return self._process_response(request, response)

    def _authenticate(self, request) -> None:
        access_token = request.COOKIES.get(settings.COOKIE_SETTINGS.get("ACCESS_COOKIE_NAME"))
        if access_token:
            try:
                payload = validate_access_token(access_token)
                self._set_user_data(request, payload)
                return
            except (TokenExpiredError, TokenInvalidError) as e:
                logger.debug(f"Access token rejected, trying refresh token: {e.message}")

        self._refresh(request)

    def _refresh(self, request) -> None:
        refresh_token = request.COOKIES.get(settings.COOKIE_SETTINGS.get("REFRESH_COOKIE_NAME"))
        if not refresh_token:
            raise TokenMissingError()

        try:
            payload = validate_refresh_token(refresh_token)
        except RefreshTokenExpiredError:
            raise TokenExpiredError(AuthErrorMessages.REFRESH_TOKEN_EXPIRED)

        self._set_user_data(request, payload)
        request._new_access_token = generate_access_token(payload["sub"], payload.get("sid"))
        request._access_token_expires = settings.JWT_CONFIG["ACCESS_TOKEN_LIFETIME"]

    def _set_user_data(self, request, payload):
        """Resolve the team profile whose id is the token subject"""
        member = TeamMemberRepository.get_by_id(payload["sub"])
        if not member:
            raise ProfileNotFoundError()
        if not member.is_active:
            raise AccountTerminatedError()

        request.user_id = member.id
        request.user_email = member.email
        request.user_name = member.name
        request.user_role = member.role
        request.is_system_account = member.isSystemAccount
        request.session_id = payload.get("sid")

    def _process_response(self, request, response):
        """Set a new access cookie if the token was refreshed"""
        if hasattr(request, "_new_access_token"):
            response.set_cookie(
                settings.COOKIE_SETTINGS.get("ACCESS_COOKIE_NAME"),
                request._new_access_token,
                max_age=request._access_token_expires,
                **get_cookie_config(),
            )
        return response

    def _is_public_path(self, path: str) -> bool:
        return any(path.startswith(public_path) for public_path in settings.PUBLIC_PATHS)

    def _handle_auth_error(self, exception: BaseAuthException):
        friendly_message = translate_auth_error(exception.code, exception.message)
        error_response = ApiErrorResponse(
            statusCode=status.HTTP_401_UNAUTHORIZED,
            message=friendly_message,
            errors=[ApiErrorDetail(title=ApiErrors.AUTHENTICATION_FAILED, detail=exception.message)],
        )
        return JsonResponse(
            data=error_response.model_dump(mode="json", exclude_none=True),
            status=status.HTTP_401_UNAUTHORIZED,
        )


def get_cookie_config() -> dict:
    return {
        "path": settings.COOKIE_SETTINGS.get("COOKIE_PATH", "/"),
        "domain": settings.COOKIE_SETTINGS.get("COOKIE_DOMAIN"),
        "secure": settings.COOKIE_SETTINGS.get("COOKIE_SECURE"),
        "httponly": settings.COOKIE_SETTINGS.get("COOKIE_HTTPONLY", True),
        "samesite": settings.COOKIE_SETTINGS.get("COOKIE_SAMESITE"),
    }


def get_current_user_info(request) -> dict | None:
    if not getattr(request, "user_id", None):
        return None

    return {
        "user_id": request.user_id,
        "email": request.user_email,
        "name": request.user_name,
        "role": request.user_role,
        "is_system_account": request.is_system_account,
    }
