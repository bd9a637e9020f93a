from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from workboard.dto.responses.calendar_responses import GetCalendarEventsResponse
from workboard.dto.responses.error_response import ApiErrorResponse
from workboard.serializers.get_calendar_events_serializer import GetCalendarEventsQueryParamsSerializer
from workboard.services.calendar_service import CalendarService


class CalendarEventsView(APIView):
    @extend_schema(
        operation_id="get_calendar_events",
        summary="Get calendar events",
        description=(
            "Task due dates and goal target dates as calendar events, coloured by status and priority "
            "and labelled relative to the caller"
        ),
        tags=["calendar"],
        parameters=[
            OpenApiParameter(
                name="start",
                type=OpenApiTypes.DATETIME,
                location=OpenApiParameter.QUERY,
                description="Only events on or after this instant",
                required=False,
            ),
            OpenApiParameter(
                name="end",
                type=OpenApiTypes.DATETIME,
                location=OpenApiParameter.QUERY,
                description="Only events on or before this instant",
                required=False,
            ),
        ],
        responses={
            200: OpenApiResponse(response=GetCalendarEventsResponse, description="Events returned"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request"),
        },
    )
    def get(self, request: Request):
        query = GetCalendarEventsQueryParamsSerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        response = CalendarService.get_events(
            request.user_id, start=query.validated_data.get("start"), end=query.validated_data.get("end")
        )
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)
