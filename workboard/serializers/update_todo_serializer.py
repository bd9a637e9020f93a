from rest_framework import serializers

from workboard.constants.messages import ValidationErrors
from workboard.constants.todo import ToDoCategory, ToDoStatus


class UpdateToDoSerializer(serializers.Serializer):
    category = serializers.ChoiceField(required=False, choices=[category.value for category in ToDoCategory])
    title = serializers.CharField(required=False, max_length=255, trim_whitespace=False)
    status = serializers.ChoiceField(required=False, choices=[todo_status.value for todo_status in ToDoStatus])
    assigneeId = serializers.CharField(required=False, allow_null=True)
    patientId = serializers.CharField(required=False, allow_null=True)
    patientName = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    dueDate = serializers.DateTimeField(required=False, allow_null=True)

    def validate_title(self, value):
        if not value.strip():
            raise serializers.ValidationError(ValidationErrors.BLANK_TITLE)
        return value.strip()

    def validate(self, data):
        if not data:
            raise serializers.ValidationError(ValidationErrors.NO_FIELDS_TO_UPDATE)
        return data
