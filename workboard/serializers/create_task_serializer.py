from bson import ObjectId
from rest_framework import serializers

from workboard.constants.messages import ValidationErrors
from workboard.constants.task import TaskPriority, TaskStatus


class ActionStepSerializer(serializers.Serializer):
    text = serializers.CharField(required=True, allow_blank=False)
    completed = serializers.BooleanField(required=False, default=False)


class CreateTaskSerializer(serializers.Serializer):
    title = serializers.CharField(
        required=True, allow_blank=False, trim_whitespace=False, max_length=255, help_text="Title of the task"
    )
    description = serializers.CharField(
        required=False, allow_blank=True, default="", help_text="Description of the task"
    )
    assigneeId = serializers.CharField(
        required=False, allow_null=True, default=None, help_text="Team member to assign; omit for the open pool"
    )
    goalId = serializers.CharField(required=False, allow_null=True, default=None, help_text="Goal the task supports")
    dueDate = serializers.DateTimeField(required=True, help_text="Due date in ISO format (UTC)")
    status = serializers.ChoiceField(
        required=False,
        choices=[status.value for status in TaskStatus],
        default=TaskStatus.NOT_STARTED.value,
    )
    priority = serializers.ChoiceField(
        required=False,
        choices=[priority.value for priority in TaskPriority],
        default=TaskPriority.MEDIUM.value,
    )
    actionSteps = ActionStepSerializer(many=True, required=False, default=list)

    def validate_title(self, value):
        if not value.strip():
            raise serializers.ValidationError(ValidationErrors.BLANK_TITLE)
        return value.strip()

    def validate_goalId(self, value):
        if value is not None and not ObjectId.is_valid(value):
            raise serializers.ValidationError(ValidationErrors.INVALID_OBJECT_ID.format(value))
        return value
