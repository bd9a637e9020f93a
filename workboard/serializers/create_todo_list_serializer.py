import re

from rest_framework import serializers

from workboard.constants.messages import ValidationErrors
from workboard.constants.todo import ToDoListType

HEX_COLOR_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")


class ToDoListSettingsSerializer(serializers.Serializer):
    allowReordering = serializers.BooleanField(required=False, default=True)
    showCompletedItems = serializers.BooleanField(required=False, default=True)
    autoArchiveCompleted = serializers.BooleanField(required=False, default=False)
    requireDueDates = serializers.BooleanField(required=False, default=False)


class CreateToDoListSerializer(serializers.Serializer):
    title = serializers.CharField(required=True, allow_blank=False, max_length=255, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)
    type = serializers.ChoiceField(
        required=False, choices=[list_type.value for list_type in ToDoListType], default=ToDoListType.PERSONAL.value
    )
    color = serializers.CharField(required=False, allow_null=True, default=None)
    order = serializers.IntegerField(required=False, min_value=0, default=0)
    sharedWith = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    settings = ToDoListSettingsSerializer(required=False)

    def validate_title(self, value):
        if not value.strip():
            raise serializers.ValidationError(ValidationErrors.BLANK_TITLE)
        return value.strip()

    def validate_color(self, value):
        if value is not None and not HEX_COLOR_PATTERN.match(value):
            raise serializers.ValidationError(ValidationErrors.INVALID_COLOR)
        return value

    def validate(self, data):
        if data.get("type") == ToDoListType.SHARED.value and not data.get("sharedWith"):
            raise serializers.ValidationError({"sharedWith": [ValidationErrors.SHARED_LIST_REQUIRES_MEMBERS]})
        return data
