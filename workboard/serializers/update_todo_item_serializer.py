from rest_framework import serializers

from workboard.constants.messages import ValidationErrors
from workboard.constants.task import TaskPriority


class UpdateToDoItemSerializer(serializers.Serializer):
    title = serializers.CharField(required=False, max_length=255, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    completed = serializers.BooleanField(required=False)
    dueDate = serializers.DateTimeField(required=False, allow_null=True)
    priority = serializers.ChoiceField(required=False, choices=[priority.value for priority in TaskPriority])
    order = serializers.IntegerField(required=False, min_value=0)
    tags = serializers.ListField(child=serializers.CharField(), required=False)
    assignedTo = serializers.CharField(required=False, allow_null=True)

    def validate_title(self, value):
        if not value.strip():
            raise serializers.ValidationError(ValidationErrors.BLANK_TITLE)
        return value.strip()

    def validate(self, data):
        if not data:
            raise serializers.ValidationError(ValidationErrors.NO_FIELDS_TO_UPDATE)
        return data
