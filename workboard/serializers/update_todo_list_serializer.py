from rest_framework import serializers

from workboard.constants.messages import ValidationErrors
from workboard.constants.todo import ToDoListType
from workboard.serializers.create_todo_list_serializer import HEX_COLOR_PATTERN, ToDoListSettingsSerializer


class UpdateToDoListSerializer(serializers.Serializer):
    title = serializers.CharField(required=False, max_length=255, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    type = serializers.ChoiceField(required=False, choices=[list_type.value for list_type in ToDoListType])
    color = serializers.CharField(required=False)
    order = serializers.IntegerField(required=False, min_value=0)
    isArchived = serializers.BooleanField(required=False)
    sharedWith = serializers.ListField(child=serializers.CharField(), required=False)
    settings = ToDoListSettingsSerializer(required=False)

    def validate_title(self, value):
        if not value.strip():
            raise serializers.ValidationError(ValidationErrors.BLANK_TITLE)
        return value.strip()

    def validate_color(self, value):
        if not HEX_COLOR_PATTERN.match(value):
            raise serializers.ValidationError(ValidationErrors.INVALID_COLOR)
        return value

    def validate(self, data):
        if not data:
            raise serializers.ValidationError(ValidationErrors.NO_FIELDS_TO_UPDATE)
        return data
