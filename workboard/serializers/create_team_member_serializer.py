from rest_framework import serializers

from workboard.constants.messages import ValidationErrors
from workboard.constants.team import MemberRole


class CreateTeamMemberSerializer(serializers.Serializer):
    id = serializers.CharField(required=True, help_text="Authentication subject id of the member's account")
    name = serializers.CharField(required=True, max_length=100, trim_whitespace=False)
    email = serializers.EmailField(required=True)
    phone = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)
    role = serializers.ChoiceField(
        required=False, choices=[role.value for role in MemberRole], default=MemberRole.STAFF.value
    )
    isSystemAccount = serializers.BooleanField(required=False, default=False)

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError(ValidationErrors.BLANK_NAME)
        return value.strip()
