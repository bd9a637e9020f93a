from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from workboard.constants.goal import GoalStatus, GoalType
from workboard.constants.messages import AppMessages
from workboard.dto.goal_dto import CreateGoalDTO
from workboard.dto.responses.error_response import ApiErrorResponse
from workboard.dto.responses.goal_responses import GetGoalsResponse, GoalResponse
from workboard.serializers.create_goal_serializer import CreateGoalSerializer
from workboard.serializers.get_goals_serializer import GetGoalsQueryParamsSerializer
from workboard.serializers.update_goal_serializer import UpdateGoalSerializer
from workboard.services.goal_service import GoalService
from workboard.utils.request_context import get_request_actor, notify_success


class GoalListView(APIView):
    @extend_schema(
        operation_id="get_goals",
        summary="Get goals",
        description="Retrieve goals ordered by target date, each with its expected progress and health",
        tags=["goals"],
        parameters=[
            OpenApiParameter(
                name="status",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=False,
                enum=[goal_status.value for goal_status in GoalStatus],
            ),
            OpenApiParameter(
                name="type",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=False,
                enum=[goal_type.value for goal_type in GoalType],
            ),
        ],
        responses={
            200: OpenApiResponse(response=GetGoalsResponse, description="Goals returned"),
        },
    )
    def get(self, request: Request):
        query = GetGoalsQueryParamsSerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        response = GoalService.get_goals(query.validated_data.get("status"), query.validated_data.get("type"))
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="create_goal",
        summary="Create a goal",
        tags=["goals"],
        request=CreateGoalSerializer,
        responses={
            201: OpenApiResponse(response=GoalResponse, description="Goal created"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request"),
        },
    )
    def post(self, request: Request):
        serializer = CreateGoalSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        goal = GoalService.create_goal(CreateGoalDTO(**serializer.validated_data), get_request_actor(request))
        notify_success(request, AppMessages.GOAL_CREATED)

        response = GoalResponse(statusCode=201, successMessage=AppMessages.GOAL_CREATED, data=goal)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_201_CREATED)


class GoalDetailView(APIView):
    @extend_schema(
        operation_id="get_goal",
        summary="Get a goal",
        description="Retrieve a goal with its health and the number of tasks supporting it",
        tags=["goals"],
        responses={
            200: OpenApiResponse(response=GoalResponse, description="Goal returned"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Goal not found"),
        },
    )
    def get(self, request: Request, goal_id: str):
        goal = GoalService.get_goal(goal_id)
        return Response(data=GoalResponse(data=goal).model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="update_goal",
        summary="Update a goal",
        tags=["goals"],
        request=UpdateGoalSerializer,
        responses={
            200: OpenApiResponse(response=GoalResponse, description="Goal updated"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Goal not found"),
        },
    )
    def patch(self, request: Request, goal_id: str):
        serializer = UpdateGoalSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        goal = GoalService.update_goal(goal_id, serializer.validated_data, get_request_actor(request))
        notify_success(request, AppMessages.GOAL_UPDATED)

        response = GoalResponse(successMessage=AppMessages.GOAL_UPDATED, data=goal)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="delete_goal",
        summary="Delete a goal",
        description="Delete a goal and detach it from the tasks that supported it",
        tags=["goals"],
        responses={
            204: OpenApiResponse(description="Goal deleted"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Goal not found"),
        },
    )
    def delete(self, request: Request, goal_id: str):
        GoalService.delete_goal(goal_id, get_request_actor(request))
        notify_success(request, AppMessages.GOAL_DELETED)
        return Response(status=status.HTTP_204_NO_CONTENT)
