from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from workboard.dto.responses.error_response import ApiErrorResponse
from workboard.dto.responses.notification_responses import GetNotificationsResponse
from workboard.services.notification_service import get_notification_registry


class NotificationListView(APIView):
    @extend_schema(
        operation_id="get_notifications",
        summary="Get active notifications",
        description="The caller's unexpired notifications, oldest first",
        tags=["notifications"],
        responses={
            200: OpenApiResponse(response=GetNotificationsResponse, description="Notifications returned"),
        },
    )
    def get(self, request: Request):
        notifications = get_notification_registry().list(request.user_id)
        response = GetNotificationsResponse(notifications=notifications)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)


class NotificationDetailView(APIView):
    @extend_schema(
        operation_id="dismiss_notification",
        summary="Dismiss a notification",
        tags=["notifications"],
        responses={
            204: OpenApiResponse(description="Notification dismissed"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Notification not found"),
        },
    )
    def delete(self, request: Request, notification_id: str):
        get_notification_registry().remove(request.user_id, notification_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
