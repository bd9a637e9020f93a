from rest_framework import serializers

from workboard.constants.goal import GoalStatus, GoalType
from workboard.constants.messages import ValidationErrors


class UpdateGoalSerializer(serializers.Serializer):
    title = serializers.CharField(required=False, max_length=255, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_blank=True)
    type = serializers.ChoiceField(required=False, choices=[goal_type.value for goal_type in GoalType])
    status = serializers.ChoiceField(required=False, choices=[goal_status.value for goal_status in GoalStatus])
    targetDate = serializers.DateTimeField(required=False, allow_null=True)
    lastReviewDate = serializers.DateTimeField(required=False, allow_null=True)
    nextReviewDate = serializers.DateTimeField(required=False, allow_null=True)
    progress = serializers.IntegerField(
        required=False,
        min_value=0,
        max_value=100,
        error_messages={
            "min_value": ValidationErrors.INVALID_PROGRESS,
            "max_value": ValidationErrors.INVALID_PROGRESS,
        },
    )
    notes = serializers.CharField(required=False, allow_null=True, allow_blank=True)

    def validate_title(self, value):
        if not value.strip():
            raise serializers.ValidationError(ValidationErrors.BLANK_TITLE)
        return value.strip()

    def validate(self, data):
        if not data:
            raise serializers.ValidationError(ValidationErrors.NO_FIELDS_TO_UPDATE)
        return data
