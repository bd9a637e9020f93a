from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiExample, OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from workboard.constants.messages import AppMessages
from workboard.constants.task import SORT_FIELDS, SORT_ORDER_ASC, SORT_ORDER_DESC, TaskStatus
from workboard.dto.responses.error_response import ApiErrorResponse
from workboard.dto.responses.task_responses import (
    CreateTaskResponse,
    GetTaskByIdResponse,
    GetTasksResponse,
    UpdateTaskResponse,
)
from workboard.dto.task_dto import CreateTaskDTO
from workboard.dto.task_filters_dto import TaskFilters
from workboard.serializers.create_task_serializer import CreateTaskSerializer
from workboard.serializers.get_tasks_serializer import GetTaskQueryParamsSerializer
from workboard.serializers.update_task_serializer import UpdateTaskSerializer
from workboard.services.task_service import TaskService
from workboard.utils.request_context import get_request_actor, is_admin, notify_success


class TaskListView(APIView):
    @extend_schema(
        operation_id="get_tasks",
        summary="Get tasks",
        description="Retrieve tasks with optional filtering and sorting. Use openOnly for the open pool.",
        tags=["tasks"],
        parameters=[
            OpenApiParameter(
                name="assigneeId",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Only tasks assigned to this team member",
                required=False,
            ),
            OpenApiParameter(
                name="status",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Only tasks in this status",
                required=False,
                enum=[task_status.value for task_status in TaskStatus],
            ),
            OpenApiParameter(
                name="goalId",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Only tasks supporting this goal",
                required=False,
            ),
            OpenApiParameter(
                name="openOnly",
                type=OpenApiTypes.BOOL,
                location=OpenApiParameter.QUERY,
                description="Only unassigned, incomplete tasks",
                required=False,
            ),
            OpenApiParameter(
                name="mine",
                type=OpenApiTypes.BOOL,
                location=OpenApiParameter.QUERY,
                description="Only tasks assigned to the caller",
                required=False,
            ),
            OpenApiParameter(
                name="sort_by",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Field to sort by",
                required=False,
                enum=SORT_FIELDS,
            ),
            OpenApiParameter(
                name="order",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Sort order",
                required=False,
                enum=[SORT_ORDER_ASC, SORT_ORDER_DESC],
            ),
        ],
        responses={
            200: OpenApiResponse(response=GetTasksResponse, description="Successful response"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request"),
        },
    )
    def get(self, request: Request):
        query = GetTaskQueryParamsSerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data

        assignee_id = request.user_id if params.get("mine") else params.get("assigneeId")
        filters = TaskFilters(
            assignee_id=assignee_id,
            status=params.get("status"),
            goal_id=params.get("goalId"),
            open_only=params.get("openOnly", False),
            sort_by=params["sort_by"],
            order=params["order"],
        )
        response = TaskService.get_tasks(filters)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="create_task",
        summary="Create a new task",
        description="Create a task. Leave assigneeId empty to put it in the open pool.",
        tags=["tasks"],
        request=CreateTaskSerializer,
        examples=[
            OpenApiExample(
                "Open pool task",
                value={
                    "title": "Restock exam room 2",
                    "dueDate": "2026-11-01T17:00:00Z",
                    "priority": "High",
                    "actionSteps": [{"text": "Check inventory"}],
                },
                request_only=True,
            ),
        ],
        responses={
            201: OpenApiResponse(response=CreateTaskResponse, description="Task created successfully"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Assignee or goal not found"),
            409: OpenApiResponse(response=ApiErrorResponse, description="Assignee is not active"),
        },
    )
    def post(self, request: Request):
        serializer = CreateTaskSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        dto = CreateTaskDTO(**serializer.validated_data)
        task = TaskService.create_task(dto, get_request_actor(request))
        notify_success(request, AppMessages.TASK_CREATED)

        return Response(data=CreateTaskResponse(data=task).model_dump(mode="json"), status=status.HTTP_201_CREATED)


class TaskDetailView(APIView):
    @extend_schema(
        operation_id="get_task_by_id",
        summary="Get task by ID",
        tags=["tasks"],
        responses={
            200: OpenApiResponse(response=GetTaskByIdResponse, description="Task returned"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Invalid task id"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Task not found"),
        },
    )
    def get(self, request: Request, task_id: str):
        task = TaskService.get_task(task_id)
        return Response(data=GetTaskByIdResponse(data=task).model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="update_task",
        summary="Update a task",
        description=(
            "Partially update a task. Moving a task to Completed records who completed it and when; "
            "moving it out of Completed clears those fields."
        ),
        tags=["tasks"],
        request=UpdateTaskSerializer,
        responses={
            200: OpenApiResponse(response=UpdateTaskResponse, description="Task updated"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Task not found"),
        },
    )
    def patch(self, request: Request, task_id: str):
        serializer = UpdateTaskSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        task = TaskService.update_task(task_id, serializer.validated_data, get_request_actor(request))
        notify_success(request, AppMessages.TASK_UPDATED)

        return Response(data=UpdateTaskResponse(data=task).model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="delete_task",
        summary="Delete a task",
        tags=["tasks"],
        responses={
            204: OpenApiResponse(description="Task deleted"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Task not found"),
        },
    )
    def delete(self, request: Request, task_id: str):
        TaskService.delete_task(task_id, get_request_actor(request))
        notify_success(request, AppMessages.TASK_DELETED)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ClaimTaskView(APIView):
    @extend_schema(
        operation_id="claim_task",
        summary="Claim an open task",
        description="Assign an unassigned, incomplete task to the caller",
        tags=["tasks"],
        request=None,
        responses={
            200: OpenApiResponse(response=UpdateTaskResponse, description="Task claimed"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Task not found"),
            409: OpenApiResponse(response=ApiErrorResponse, description="Task already assigned or completed"),
        },
    )
    def post(self, request: Request, task_id: str):
        task = TaskService.claim_task(task_id, get_request_actor(request))
        notify_success(request, AppMessages.TASK_CLAIMED)

        response = UpdateTaskResponse(successMessage=AppMessages.TASK_CLAIMED, data=task)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)


class UnclaimTaskView(APIView):
    @extend_schema(
        operation_id="unclaim_task",
        summary="Release a task",
        description="Return a task to the open pool. Allowed for the assignee and administrators.",
        tags=["tasks"],
        request=None,
        responses={
            200: OpenApiResponse(response=UpdateTaskResponse, description="Task released"),
            403: OpenApiResponse(response=ApiErrorResponse, description="Caller may not release this task"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Task not found"),
            409: OpenApiResponse(response=ApiErrorResponse, description="Task is not assigned"),
        },
    )
    def post(self, request: Request, task_id: str):
        task = TaskService.unclaim_task(task_id, get_request_actor(request), is_admin=is_admin(request))
        notify_success(request, AppMessages.TASK_UNCLAIMED)

        response = UpdateTaskResponse(successMessage=AppMessages.TASK_UNCLAIMED, data=task)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)
