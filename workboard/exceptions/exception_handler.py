import logging
from typing import List

from bson.errors import InvalidId as BsonInvalidId
from django.conf import settings
from rest_framework import status
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.response import Response
from rest_framework.utils.serializer_helpers import ReturnDict
from rest_framework.views import exception_handler as drf_exception_handler

from workboard.constants.audit import AuditAction
from workboard.constants.messages import ApiErrors, AuthErrorMessages, NotificationTitles, ValidationErrors
from workboard.dto.audit_actor_dto import AuditActor
from workboard.dto.responses.error_response import ApiErrorDetail, ApiErrorResponse, ApiErrorSource
from workboard.exceptions.auth_exceptions import BaseAuthException, TokenExpiredError
from workboard.exceptions.common_exceptions import ResourceNotFoundException, StateConflictException
from workboard.exceptions.permission_exceptions import PermissionDeniedError
from workboard.services.audit_service import AuditService
from workboard.services.notification_service import get_notification_registry

logger = logging.getLogger(__name__)

NOTIFIED_STATUS_CODES = {status.HTTP_403_FORBIDDEN, status.HTTP_409_CONFLICT}


def format_validation_errors(errors) -> List[ApiErrorDetail]:
    formatted_errors = []
    if isinstance(errors, ReturnDict | dict):
        for field, messages in errors.items():
            details = messages if isinstance(messages, list) else [messages]
            for message_detail in details:
                if isinstance(message_detail, dict):
                    nested_errors = format_validation_errors(message_detail)
                    formatted_errors.extend(nested_errors)
                else:
                    formatted_errors.append(
                        ApiErrorDetail(detail=str(message_detail), source={ApiErrorSource.PARAMETER: field})
                    )
    elif isinstance(errors, list):
        for message_detail in errors:
            formatted_errors.append(ApiErrorDetail(detail=str(message_detail)))
    return formatted_errors


def _path_source(context, path_param: str | None):
    kwargs = context.get("kwargs") or {}
    if path_param and path_param in kwargs:
        return {ApiErrorSource.PATH: path_param}
    if kwargs:
        return {ApiErrorSource.PATH: next(iter(kwargs))}
    return None


def _record_access_denied(request, exc: PermissionDeniedError):
    actor = AuditActor.from_request(request)
    AuditService.log_auth(
        actor,
        AuditAction.ACCESS_DENIED,
        details={"path": request.path, "method": request.method, "resource": exc.resource, "reason": exc.message},
    )


def _notify_failure(request, status_code: int, message: str):
    member_id = getattr(request, "user_id", None)
    if not member_id:
        return
    if status_code not in NOTIFIED_STATUS_CODES and status_code < status.HTTP_500_INTERNAL_SERVER_ERROR:
        return
    if status_code == status.HTTP_403_FORBIDDEN:
        title = NotificationTitles.ACCESS_DENIED
    else:
        title = getattr(request, "failure_title", None) or NotificationTitles.ERROR
    get_notification_registry().error(member_id, title, message)


def handle_exception(exc, context):
    response = drf_exception_handler(exc, context)
    request = context.get("request")

    error_list = []
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    if isinstance(exc, BaseAuthException):
        status_code = status.HTTP_401_UNAUTHORIZED
        error_list.append(
            ApiErrorDetail(
                source={ApiErrorSource.HEADER: "Authorization"},
                title=AuthErrorMessages.TOKEN_EXPIRED_TITLE
                if isinstance(exc, TokenExpiredError)
                else AuthErrorMessages.INVALID_TOKEN_TITLE,
                detail=exc.message,
            )
        )
    elif isinstance(exc, ResourceNotFoundException):
        status_code = status.HTTP_404_NOT_FOUND
        error_list.append(
            ApiErrorDetail(
                source=_path_source(context, exc.path_param),
                title=ApiErrors.RESOURCE_NOT_FOUND_TITLE,
                detail=exc.message,
            )
        )
    elif isinstance(exc, PermissionDeniedError):
        status_code = status.HTTP_403_FORBIDDEN
        error_list.append(ApiErrorDetail(title=ApiErrors.FORBIDDEN_TITLE, detail=exc.message))
        if request is not None:
            _record_access_denied(request, exc)
    elif isinstance(exc, StateConflictException):
        status_code = status.HTTP_409_CONFLICT
        error_list.append(ApiErrorDetail(title=ApiErrors.STATE_CONFLICT_TITLE, detail=exc.message))
    elif isinstance(exc, BsonInvalidId):
        status_code = status.HTTP_400_BAD_REQUEST
        error_list.append(
            ApiErrorDetail(
                source=_path_source(context, None),
                title=ApiErrors.VALIDATION_ERROR,
                detail=ValidationErrors.INVALID_ID_FORMAT,
            )
        )
    elif isinstance(exc, DRFValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
        error_list = format_validation_errors(exc.detail)
        if not error_list and exc.detail:
            error_list.append(ApiErrorDetail(detail=str(exc.detail), title=ApiErrors.VALIDATION_ERROR))
    elif response is not None:
        status_code = response.status_code
        if isinstance(response.data, dict) and "detail" in response.data:
            detail_str = str(response.data["detail"])
            error_list.append(ApiErrorDetail(detail=detail_str, title=detail_str))
        else:
            error_list.append(ApiErrorDetail(detail=str(response.data), title=str(exc)))
    else:
        logger.exception(f"Unhandled error while processing request: {str(exc)}", exc_info=exc)
        error_list.append(
            ApiErrorDetail(
                detail=str(exc) if settings.DEBUG else ApiErrors.INTERNAL_SERVER_ERROR,
                title=ApiErrors.UNEXPECTED_ERROR,
            )
        )

    if not error_list:
        error_list.append(
            ApiErrorDetail(
                detail=str(exc) if settings.DEBUG else ApiErrors.INTERNAL_SERVER_ERROR,
                title=ApiErrors.UNEXPECTED_ERROR,
            )
        )

    final_response_data = ApiErrorResponse(
        statusCode=status_code,
        message=error_list[0].detail,
        errors=error_list,
    )

    if request is not None:
        _notify_failure(request, status_code, final_response_data.message)

    return Response(data=final_response_data.model_dump(mode="json", exclude_none=True), status=status_code)
