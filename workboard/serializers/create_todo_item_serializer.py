from rest_framework import serializers

from workboard.constants.messages import ValidationErrors
from workboard.constants.task import TaskPriority


class CreateToDoItemSerializer(serializers.Serializer):
    title = serializers.CharField(required=True, allow_blank=False, max_length=255, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)
    dueDate = serializers.DateTimeField(required=False, allow_null=True, default=None)
    priority = serializers.ChoiceField(
        required=False, choices=[priority.value for priority in TaskPriority], default=TaskPriority.MEDIUM.value
    )
    order = serializers.IntegerField(required=False, min_value=0, default=0)
    tags = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    assignedTo = serializers.CharField(required=False, allow_null=True, default=None)

    def validate_title(self, value):
        if not value.strip():
            raise serializers.ValidationError(ValidationErrors.BLANK_TITLE)
        return value.strip()
