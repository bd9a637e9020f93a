from datetime import datetime, timezone

from rest_framework import serializers

from workboard.constants.goal import GoalStatus, GoalType
from workboard.constants.messages import ValidationErrors


class CreateGoalSerializer(serializers.Serializer):
    title = serializers.CharField(required=True, allow_blank=False, max_length=255, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    type = serializers.ChoiceField(choices=[goal_type.value for goal_type in GoalType], default=GoalType.MONTHLY.value)
    status = serializers.ChoiceField(
        choices=[goal_status.value for goal_status in GoalStatus], default=GoalStatus.ACTIVE.value
    )
    targetDate = serializers.DateTimeField(required=False, allow_null=True, default=None)
    nextReviewDate = serializers.DateTimeField(required=False, allow_null=True, default=None)
    progress = serializers.IntegerField(
        required=False,
        default=0,
        min_value=0,
        max_value=100,
        error_messages={
            "min_value": ValidationErrors.INVALID_PROGRESS,
            "max_value": ValidationErrors.INVALID_PROGRESS,
        },
    )
    notes = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)

    def validate_title(self, value):
        if not value.strip():
            raise serializers.ValidationError(ValidationErrors.BLANK_TITLE)
        return value.strip()

    def validate_targetDate(self, value):
        if value is not None and value <= datetime.now(timezone.utc):
            raise serializers.ValidationError(ValidationErrors.TARGET_BEFORE_CREATED)
        return value
