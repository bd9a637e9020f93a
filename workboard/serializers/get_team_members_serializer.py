from rest_framework import serializers

from workboard.constants.team import MemberStatus


class GetTeamMembersQueryParamsSerializer(serializers.Serializer):
    status = serializers.ChoiceField(required=False, choices=[member_status.value for member_status in MemberStatus])
