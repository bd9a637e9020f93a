from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from workboard.dto.responses.analytics_responses import AnalyticsResponse
from workboard.services.analytics_service import AnalyticsService


class AnalyticsView(APIView):
    @extend_schema(
        operation_id="get_analytics",
        summary="Get dashboard analytics",
        description=(
            "Goal health counts, open-task workload per active member, overall totals, "
            "a per-member scorecard and a per-goal task breakdown, computed on request"
        ),
        tags=["analytics"],
        responses={
            200: OpenApiResponse(response=AnalyticsResponse, description="Analytics computed"),
        },
    )
    def get(self, request: Request):
        response = AnalyticsService.get_analytics()
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)
