from django.http import HttpResponse
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from workboard.constants.audit import AuditAction, AuditDateRange
from workboard.dto.audit_log_filters_dto import AuditLogFilters
from workboard.dto.responses.audit_log_responses import GetAuditLogsResponse
from workboard.dto.responses.error_response import ApiErrorResponse
from workboard.serializers.get_audit_logs_serializer import GetAuditLogsQueryParamsSerializer
from workboard.services.audit_log_service import AuditLogService
from workboard.utils.request_context import require_system_account

AUDIT_LOG_PARAMETERS = [
    OpenApiParameter(
        name="action",
        type=OpenApiTypes.STR,
        location=OpenApiParameter.QUERY,
        required=False,
        enum=[action.value for action in AuditAction],
    ),
    OpenApiParameter(name="collectionName", type=OpenApiTypes.STR, location=OpenApiParameter.QUERY, required=False),
    OpenApiParameter(name="userId", type=OpenApiTypes.STR, location=OpenApiParameter.QUERY, required=False),
    OpenApiParameter(
        name="dateRange",
        type=OpenApiTypes.STR,
        location=OpenApiParameter.QUERY,
        required=False,
        enum=[date_range.value for date_range in AuditDateRange],
    ),
    OpenApiParameter(
        name="search",
        type=OpenApiTypes.STR,
        location=OpenApiParameter.QUERY,
        description="Case-insensitive match on user, collection, document id and changes",
        required=False,
    ),
    OpenApiParameter(name="limit", type=OpenApiTypes.INT, location=OpenApiParameter.QUERY, required=False),
]


def _parse_filters(request: Request) -> AuditLogFilters:
    query = GetAuditLogsQueryParamsSerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    params = query.validated_data
    return AuditLogFilters(
        action=params.get("action"),
        collection_name=params.get("collectionName"),
        user_id=params.get("userId"),
        date_range=params.get("dateRange"),
        search=params.get("search"),
        limit=params.get("limit"),
    )


class AuditLogListView(APIView):
    @extend_schema(
        operation_id="get_audit_logs",
        summary="Browse audit logs",
        description="Newest first. Only available to system accounts.",
        tags=["audit-logs"],
        parameters=AUDIT_LOG_PARAMETERS,
        responses={
            200: OpenApiResponse(response=GetAuditLogsResponse, description="Audit logs returned"),
            403: OpenApiResponse(response=ApiErrorResponse, description="Caller is not a system account"),
        },
    )
    def get(self, request: Request):
        require_system_account(request)
        response = AuditLogService.get_audit_logs(_parse_filters(request))
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)


class AuditLogExportView(APIView):
    @extend_schema(
        operation_id="export_audit_logs",
        summary="Export audit logs as CSV",
        description="Download the filtered audit logs as a CSV file. Only available to system accounts.",
        tags=["audit-logs"],
        parameters=AUDIT_LOG_PARAMETERS,
        responses={
            (200, "text/csv"): OpenApiResponse(response=OpenApiTypes.STR, description="CSV document"),
            403: OpenApiResponse(response=ApiErrorResponse, description="Caller is not a system account"),
        },
    )
    def get(self, request: Request):
        require_system_account(request)
        content, filename = AuditLogService.export_audit_logs(_parse_filters(request))

        response = HttpResponse(content, content_type="text/csv; charset=utf-8")
        response["Content-Disposition"] = f'attachment; filename="{filename}"'
        return response
