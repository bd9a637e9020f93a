from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from workboard.constants.messages import AppMessages, NotificationTitles
from workboard.constants.team import MemberStatus
from workboard.dto.responses.error_response import ApiErrorResponse
from workboard.dto.responses.team_member_responses import (
    GetTeamMembersResponse,
    TeamMemberResponse,
    TerminateMemberResponse,
)
from workboard.dto.team_member_dto import CreateTeamMemberDTO
from workboard.serializers.create_team_member_serializer import CreateTeamMemberSerializer
from workboard.serializers.get_team_members_serializer import GetTeamMembersQueryParamsSerializer
from workboard.serializers.terminate_member_serializer import TerminateMemberSerializer
from workboard.serializers.update_team_member_serializer import UpdateTeamMemberSerializer
from workboard.services.team_member_service import TeamMemberService
from workboard.utils.request_context import get_request_actor, notify_success, require_admin


class TeamMemberListView(APIView):
    @extend_schema(
        operation_id="get_team_members",
        summary="List team members",
        description="Retrieve the team roster, optionally filtered by status",
        tags=["team"],
        parameters=[
            OpenApiParameter(
                name="status",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Filter by member status (active or terminated)",
                required=False,
                enum=[member_status.value for member_status in MemberStatus],
            ),
        ],
        responses={
            200: OpenApiResponse(response=GetTeamMembersResponse, description="Team members returned"),
        },
    )
    def get(self, request: Request):
        query = GetTeamMembersQueryParamsSerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        response = TeamMemberService.get_members(query.validated_data.get("status"))
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="create_team_member",
        summary="Add a team member",
        description="Create the team profile for an authentication account. Administrators only.",
        tags=["team"],
        request=CreateTeamMemberSerializer,
        responses={
            201: OpenApiResponse(response=TeamMemberResponse, description="Team member created"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request"),
            403: OpenApiResponse(response=ApiErrorResponse, description="Forbidden"),
            409: OpenApiResponse(response=ApiErrorResponse, description="Member already exists"),
        },
    )
    def post(self, request: Request):
        require_admin(request, "create team member")
        serializer = CreateTeamMemberSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        dto = CreateTeamMemberDTO(**serializer.validated_data)
        member = TeamMemberService.create_member(dto, get_request_actor(request))
        notify_success(request, AppMessages.MEMBER_CREATED)

        response = TeamMemberResponse(statusCode=201, successMessage=AppMessages.MEMBER_CREATED, data=member)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_201_CREATED)


class TeamMemberDetailView(APIView):
    @extend_schema(
        operation_id="get_team_member",
        summary="Get a team member",
        tags=["team"],
        responses={
            200: OpenApiResponse(response=TeamMemberResponse, description="Team member returned"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team member not found"),
        },
    )
    def get(self, request: Request, member_id: str):
        member = TeamMemberService.get_member(member_id)
        return Response(data=TeamMemberResponse(data=member).model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="update_team_member",
        summary="Update a team member",
        description="Update profile fields. Status changes go through terminate and reactivate. Administrators only.",
        tags=["team"],
        request=UpdateTeamMemberSerializer,
        responses={
            200: OpenApiResponse(response=TeamMemberResponse, description="Team member updated"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request"),
            403: OpenApiResponse(response=ApiErrorResponse, description="Forbidden"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team member not found"),
        },
    )
    def patch(self, request: Request, member_id: str):
        require_admin(request, "update team member")
        serializer = UpdateTeamMemberSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        member = TeamMemberService.update_member(member_id, serializer.validated_data, get_request_actor(request))
        notify_success(request, AppMessages.MEMBER_UPDATED)

        response = TeamMemberResponse(successMessage=AppMessages.MEMBER_UPDATED, data=member)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="delete_team_member",
        summary="Remove a team member",
        description="Delete the team profile. Administrators only.",
        tags=["team"],
        responses={
            204: OpenApiResponse(description="Team member deleted"),
            403: OpenApiResponse(response=ApiErrorResponse, description="Forbidden"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team member not found"),
        },
    )
    def delete(self, request: Request, member_id: str):
        require_admin(request, "delete team member")
        TeamMemberService.delete_member(member_id, get_request_actor(request))
        notify_success(request, AppMessages.MEMBER_DELETED)
        return Response(status=status.HTTP_204_NO_CONTENT)


class TerminateMemberView(APIView):
    @extend_schema(
        operation_id="terminate_team_member",
        summary="Terminate a team member",
        description=(
            "Mark the member as terminated and return every one of their open tasks to the open pool "
            "in a single transaction. Administrators only."
        ),
        tags=["team"],
        request=TerminateMemberSerializer,
        responses={
            200: OpenApiResponse(response=TerminateMemberResponse, description="Member terminated"),
            403: OpenApiResponse(response=ApiErrorResponse, description="Forbidden"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team member not found"),
            409: OpenApiResponse(response=ApiErrorResponse, description="Member already terminated"),
        },
    )
    def post(self, request: Request, member_id: str):
        require_admin(request, "terminate team member")
        serializer = TerminateMemberSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        request.failure_title = NotificationTitles.TERMINATION_FAILED
        result = TeamMemberService.terminate(
            member_id, get_request_actor(request), reason=serializer.validated_data.get("reason")
        )

        message = AppMessages.MEMBER_TERMINATED.format(result.member.name, result.releasedTaskCount)
        notify_success(request, message, title=NotificationTitles.MEMBER_TERMINATED)

        response = TerminateMemberResponse(successMessage=message, data=result)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)


class ReactivateMemberView(APIView):
    @extend_schema(
        operation_id="reactivate_team_member",
        summary="Reactivate a team member",
        description=(
            "Set a terminated member back to active. Released tasks stay in the open pool. Administrators only."
        ),
        tags=["team"],
        request=None,
        responses={
            200: OpenApiResponse(response=TeamMemberResponse, description="Member reactivated"),
            403: OpenApiResponse(response=ApiErrorResponse, description="Forbidden"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team member not found"),
            409: OpenApiResponse(response=ApiErrorResponse, description="Member already active"),
        },
    )
    def post(self, request: Request, member_id: str):
        require_admin(request, "reactivate team member")
        member = TeamMemberService.reactivate_member(member_id, get_request_actor(request))

        message = AppMessages.MEMBER_REACTIVATED.format(member.name)
        notify_success(request, message)

        response = TeamMemberResponse(successMessage=message, data=member)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)
