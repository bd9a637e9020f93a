from bson import ObjectId
from rest_framework import serializers

from workboard.constants.messages import ValidationErrors
from workboard.constants.task import TaskPriority, TaskStatus
from workboard.serializers.create_task_serializer import ActionStepSerializer


class UpdateTaskSerializer(serializers.Serializer):
    title = serializers.CharField(required=False, allow_blank=True, max_length=255, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_blank=True)
    assigneeId = serializers.CharField(required=False, allow_null=True)
    goalId = serializers.CharField(required=False, allow_null=True)
    dueDate = serializers.DateTimeField(required=False)
    status = serializers.ChoiceField(required=False, choices=[status.value for status in TaskStatus])
    priority = serializers.ChoiceField(required=False, choices=[priority.value for priority in TaskPriority])
    actionSteps = ActionStepSerializer(many=True, required=False)

    def validate_title(self, value):
        if not value.strip():
            raise serializers.ValidationError(ValidationErrors.BLANK_TITLE)
        return value.strip()

    def validate_goalId(self, value):
        if value is not None and not ObjectId.is_valid(value):
            raise serializers.ValidationError(ValidationErrors.INVALID_OBJECT_ID.format(value))
        return value

    def validate(self, data):
        if not data:
            raise serializers.ValidationError(ValidationErrors.NO_FIELDS_TO_UPDATE)
        return data
