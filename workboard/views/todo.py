from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from workboard.constants.messages import AppMessages
from workboard.dto.responses.error_response import ApiErrorResponse
from workboard.dto.responses.todo_responses import (
    GetToDoItemsResponse,
    GetToDoListsResponse,
    GetToDosResponse,
    ToDoItemResponse,
    ToDoListResponse,
    ToDoResponse,
)
from workboard.dto.todo_dto import CreateToDoDTO, CreateToDoItemDTO, CreateToDoListDTO
from workboard.serializers.create_todo_item_serializer import CreateToDoItemSerializer
from workboard.serializers.create_todo_list_serializer import CreateToDoListSerializer
from workboard.serializers.create_todo_serializer import CreateToDoSerializer
from workboard.serializers.get_todos_serializer import GetToDosQueryParamsSerializer
from workboard.serializers.update_todo_item_serializer import UpdateToDoItemSerializer
from workboard.serializers.update_todo_list_serializer import UpdateToDoListSerializer
from workboard.serializers.update_todo_serializer import UpdateToDoSerializer
from workboard.services.todo_service import TodoService
from workboard.utils.request_context import get_request_actor, notify_success


class ToDoListView(APIView):
    @extend_schema(
        operation_id="get_todos",
        summary="Get to-dos",
        description="Retrieve kanban to-dos, optionally filtered by assignee, category or status",
        tags=["todos"],
        parameters=[
            OpenApiParameter(name="assigneeId", type=OpenApiTypes.STR, location=OpenApiParameter.QUERY, required=False),
            OpenApiParameter(name="category", type=OpenApiTypes.STR, location=OpenApiParameter.QUERY, required=False),
            OpenApiParameter(name="status", type=OpenApiTypes.STR, location=OpenApiParameter.QUERY, required=False),
        ],
        responses={
            200: OpenApiResponse(response=GetToDosResponse, description="To-dos returned"),
        },
    )
    def get(self, request: Request):
        query = GetToDosQueryParamsSerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data

        response = TodoService.get_todos(params.get("assigneeId"), params.get("category"), params.get("status"))
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="create_todo",
        summary="Create a to-do",
        tags=["todos"],
        request=CreateToDoSerializer,
        responses={
            201: OpenApiResponse(response=ToDoResponse, description="To-do created"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request"),
        },
    )
    def post(self, request: Request):
        serializer = CreateToDoSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        todo = TodoService.create_todo(CreateToDoDTO(**serializer.validated_data), get_request_actor(request))
        notify_success(request, AppMessages.TODO_CREATED)

        response = ToDoResponse(statusCode=201, successMessage=AppMessages.TODO_CREATED, data=todo)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_201_CREATED)


class ToDoDetailView(APIView):
    @extend_schema(
        operation_id="get_todo",
        summary="Get a to-do",
        tags=["todos"],
        responses={
            200: OpenApiResponse(response=ToDoResponse, description="To-do returned"),
            404: OpenApiResponse(response=ApiErrorResponse, description="To-do not found"),
        },
    )
    def get(self, request: Request, todo_id: str):
        todo = TodoService.get_todo(todo_id)
        return Response(data=ToDoResponse(data=todo).model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="update_todo",
        summary="Update a to-do",
        description="Partially update a to-do. Moving it to completed stamps the completion date.",
        tags=["todos"],
        request=UpdateToDoSerializer,
        responses={
            200: OpenApiResponse(response=ToDoResponse, description="To-do updated"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request"),
            404: OpenApiResponse(response=ApiErrorResponse, description="To-do not found"),
        },
    )
    def patch(self, request: Request, todo_id: str):
        serializer = UpdateToDoSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        todo = TodoService.update_todo(todo_id, serializer.validated_data, get_request_actor(request))
        notify_success(request, AppMessages.TODO_UPDATED)

        response = ToDoResponse(successMessage=AppMessages.TODO_UPDATED, data=todo)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="delete_todo",
        summary="Delete a to-do",
        tags=["todos"],
        responses={
            204: OpenApiResponse(description="To-do deleted"),
            404: OpenApiResponse(response=ApiErrorResponse, description="To-do not found"),
        },
    )
    def delete(self, request: Request, todo_id: str):
        TodoService.delete_todo(todo_id, get_request_actor(request))
        notify_success(request, AppMessages.TODO_DELETED)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ToDoListsView(APIView):
    @extend_schema(
        operation_id="get_todo_lists",
        summary="Get to-do lists",
        description="Retrieve the lists visible to the caller: their own, those shared with them and department lists",
        tags=["todo-lists"],
        parameters=[
            OpenApiParameter(
                name="includeArchived",
                type=OpenApiTypes.BOOL,
                location=OpenApiParameter.QUERY,
                description="Include archived lists",
                required=False,
            ),
        ],
        responses={
            200: OpenApiResponse(response=GetToDoListsResponse, description="Lists returned"),
        },
    )
    def get(self, request: Request):
        include_archived = request.query_params.get("includeArchived", "").lower() in ("true", "1")
        response = TodoService.get_lists(request.user_id, include_archived=include_archived)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="create_todo_list",
        summary="Create a to-do list",
        tags=["todo-lists"],
        request=CreateToDoListSerializer,
        responses={
            201: OpenApiResponse(response=ToDoListResponse, description="List created"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request"),
        },
    )
    def post(self, request: Request):
        serializer = CreateToDoListSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        todo_list = TodoService.create_list(CreateToDoListDTO(**serializer.validated_data), get_request_actor(request))
        notify_success(request, AppMessages.TODO_LIST_CREATED)

        response = ToDoListResponse(statusCode=201, successMessage=AppMessages.TODO_LIST_CREATED, data=todo_list)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_201_CREATED)


class ToDoListDetailView(APIView):
    @extend_schema(
        operation_id="get_todo_list",
        summary="Get a to-do list",
        tags=["todo-lists"],
        responses={
            200: OpenApiResponse(response=ToDoListResponse, description="List returned"),
            403: OpenApiResponse(response=ApiErrorResponse, description="List not visible to the caller"),
            404: OpenApiResponse(response=ApiErrorResponse, description="List not found"),
        },
    )
    def get(self, request: Request, list_id: str):
        todo_list = TodoService.get_list(list_id, request.user_id)
        return Response(data=ToDoListResponse(data=todo_list).model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="update_todo_list",
        summary="Update a to-do list",
        tags=["todo-lists"],
        request=UpdateToDoListSerializer,
        responses={
            200: OpenApiResponse(response=ToDoListResponse, description="List updated"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request"),
            403: OpenApiResponse(response=ApiErrorResponse, description="List not visible to the caller"),
            404: OpenApiResponse(response=ApiErrorResponse, description="List not found"),
        },
    )
    def patch(self, request: Request, list_id: str):
        serializer = UpdateToDoListSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        todo_list = TodoService.update_list(list_id, serializer.validated_data, get_request_actor(request))
        notify_success(request, AppMessages.TODO_LIST_UPDATED)

        response = ToDoListResponse(successMessage=AppMessages.TODO_LIST_UPDATED, data=todo_list)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="delete_todo_list",
        summary="Delete a to-do list",
        description="Delete a list together with all of its items",
        tags=["todo-lists"],
        responses={
            204: OpenApiResponse(description="List deleted"),
            403: OpenApiResponse(response=ApiErrorResponse, description="List not visible to the caller"),
            404: OpenApiResponse(response=ApiErrorResponse, description="List not found"),
        },
    )
    def delete(self, request: Request, list_id: str):
        TodoService.delete_list(list_id, get_request_actor(request))
        notify_success(request, AppMessages.TODO_LIST_DELETED)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ToDoItemsView(APIView):
    @extend_schema(
        operation_id="get_todo_items",
        summary="Get the items of a list",
        description="Completed items are left out when the list's showCompletedItems setting is off",
        tags=["todo-lists"],
        responses={
            200: OpenApiResponse(response=GetToDoItemsResponse, description="Items returned"),
            403: OpenApiResponse(response=ApiErrorResponse, description="List not visible to the caller"),
            404: OpenApiResponse(response=ApiErrorResponse, description="List not found"),
        },
    )
    def get(self, request: Request, list_id: str):
        response = TodoService.get_items(list_id, request.user_id)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="create_todo_item",
        summary="Add an item to a list",
        tags=["todo-lists"],
        request=CreateToDoItemSerializer,
        responses={
            201: OpenApiResponse(response=ToDoItemResponse, description="Item created"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request"),
            403: OpenApiResponse(response=ApiErrorResponse, description="List not visible to the caller"),
            404: OpenApiResponse(response=ApiErrorResponse, description="List not found"),
        },
    )
    def post(self, request: Request, list_id: str):
        serializer = CreateToDoItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        item = TodoService.create_item(
            list_id, CreateToDoItemDTO(**serializer.validated_data), get_request_actor(request)
        )
        notify_success(request, AppMessages.TODO_ITEM_CREATED)

        response = ToDoItemResponse(statusCode=201, successMessage=AppMessages.TODO_ITEM_CREATED, data=item)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_201_CREATED)


class ToDoItemDetailView(APIView):
    @extend_schema(
        operation_id="update_todo_item",
        summary="Update a list item",
        tags=["todo-lists"],
        request=UpdateToDoItemSerializer,
        responses={
            200: OpenApiResponse(response=ToDoItemResponse, description="Item updated"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request"),
            404: OpenApiResponse(response=ApiErrorResponse, description="List or item not found"),
        },
    )
    def patch(self, request: Request, list_id: str, item_id: str):
        serializer = UpdateToDoItemSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        item = TodoService.update_item(list_id, item_id, serializer.validated_data, get_request_actor(request))
        notify_success(request, AppMessages.TODO_ITEM_UPDATED)

        response = ToDoItemResponse(successMessage=AppMessages.TODO_ITEM_UPDATED, data=item)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="delete_todo_item",
        summary="Delete a list item",
        tags=["todo-lists"],
        responses={
            204: OpenApiResponse(description="Item deleted"),
            404: OpenApiResponse(response=ApiErrorResponse, description="List or item not found"),
        },
    )
    def delete(self, request: Request, list_id: str, item_id: str):
        TodoService.delete_item(list_id, item_id, get_request_actor(request))
        notify_success(request, AppMessages.TODO_ITEM_DELETED)
        return Response(status=status.HTTP_204_NO_CONTENT)
