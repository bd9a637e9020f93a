from rest_framework import serializers

from workboard.constants.messages import ValidationErrors
from workboard.constants.team import MemberRole


class UpdateTeamMemberSerializer(serializers.Serializer):
    """Profile fields only. Status changes go through terminate and reactivate."""

    name = serializers.CharField(required=False, max_length=100, trim_whitespace=False)
    email = serializers.EmailField(required=False)
    phone = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    role = serializers.ChoiceField(required=False, choices=[role.value for role in MemberRole])
    isSystemAccount = serializers.BooleanField(required=False)

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError(ValidationErrors.BLANK_NAME)
        return value.strip()

    def validate(self, data):
        if not data:
            raise serializers.ValidationError(ValidationErrors.NO_FIELDS_TO_UPDATE)
        return data
