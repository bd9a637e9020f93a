from rest_framework import serializers

from workboard.constants.messages import ValidationErrors
from workboard.constants.todo import ToDoCategory, ToDoStatus


class CreateToDoSerializer(serializers.Serializer):
    category = serializers.ChoiceField(choices=[category.value for category in ToDoCategory])
    title = serializers.CharField(required=True, allow_blank=False, max_length=255, trim_whitespace=False)
    status = serializers.ChoiceField(
        required=False, choices=[todo_status.value for todo_status in ToDoStatus], default=ToDoStatus.PENDING.value
    )
    assigneeId = serializers.CharField(required=False, allow_null=True, default=None)
    patientId = serializers.CharField(required=False, allow_null=True, default=None)
    patientName = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)
    dueDate = serializers.DateTimeField(required=False, allow_null=True, default=None)

    def validate_title(self, value):
        if not value.strip():
            raise serializers.ValidationError(ValidationErrors.BLANK_TITLE)
        return value.strip()
