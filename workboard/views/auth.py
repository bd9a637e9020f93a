from django.conf import settings
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from workboard.constants.audit import AuditAction
from workboard.constants.messages import AppMessages
from workboard.dto.responses.team_member_responses import TeamMemberResponse
from workboard.middlewares.jwt_auth import get_cookie_config
from workboard.services.audit_service import AuditService
from workboard.services.notification_service import get_notification_registry
from workboard.services.team_member_service import TeamMemberService
from workboard.utils.jwt_utils import generate_token_pair
from workboard.utils.request_context import get_request_actor


class SessionView(APIView):
    @extend_schema(
        operation_id="start_session",
        summary="Start a session",
        description=(
            "Record a sign-in for the authenticated member, issue a fresh token pair bound to a new "
            "session id and return the member's team profile."
        ),
        tags=["auth"],
        responses={
            200: OpenApiResponse(response=TeamMemberResponse, description="Session started"),
            401: OpenApiResponse(description="Not authenticated or no team profile"),
        },
    )
    def post(self, request: Request):
        tokens = generate_token_pair(request.user_id)
        request.session_id = tokens["session_id"]
        actor = get_request_actor(request)

        AuditService.log_auth(actor, AuditAction.LOGIN, details={"email": actor.email})
        member = TeamMemberService.get_member(request.user_id)

        response = Response(
            data=TeamMemberResponse(successMessage=AppMessages.LOGIN_SUCCESS, data=member).model_dump(mode="json"),
            status=status.HTTP_200_OK,
        )
        self._set_auth_cookies(response, tokens)
        return response

    def _set_auth_cookies(self, response, tokens):
        config = get_cookie_config()
        response.set_cookie(
            settings.COOKIE_SETTINGS.get("ACCESS_COOKIE_NAME"),
            tokens["access_token"],
            max_age=tokens["expires_in"],
            **config,
        )
        response.set_cookie(
            settings.COOKIE_SETTINGS.get("REFRESH_COOKIE_NAME"),
            tokens["refresh_token"],
            max_age=settings.JWT_CONFIG.get("REFRESH_TOKEN_LIFETIME"),
            **config,
        )


class LogoutView(APIView):
    @extend_schema(
        operation_id="logout",
        summary="Logout",
        description="Record a sign-out, clear the member's notifications and delete the authentication cookies",
        tags=["auth"],
        responses={
            200: OpenApiResponse(description="Logout successful"),
        },
    )
    def post(self, request: Request):
        actor = get_request_actor(request)
        AuditService.log_auth(actor, AuditAction.LOGOUT, details={"email": actor.email})
        get_notification_registry().clear(actor.id)

        response = Response(
            {
                "statusCode": status.HTTP_200_OK,
                "message": AppMessages.LOGOUT_SUCCESS,
                "data": {"success": True},
            }
        )
        self._clear_auth_cookies(response)
        return response

    def _clear_auth_cookies(self, response):
        delete_config = {
            "path": settings.COOKIE_SETTINGS.get("COOKIE_PATH", "/"),
            "domain": settings.COOKIE_SETTINGS.get("COOKIE_DOMAIN"),
        }
        response.delete_cookie(settings.COOKIE_SETTINGS.get("ACCESS_COOKIE_NAME"), **delete_config)
        response.delete_cookie(settings.COOKIE_SETTINGS.get("REFRESH_COOKIE_NAME"), **delete_config)
