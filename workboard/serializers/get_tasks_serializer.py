from bson import ObjectId
from rest_framework import serializers

from workboard.constants.messages import ValidationErrors
from workboard.constants.task import (
    DEFAULT_SORT_FIELD,
    DEFAULT_SORT_ORDER,
    SORT_FIELDS,
    SORT_ORDER_ASC,
    SORT_ORDER_DESC,
    TaskStatus,
)


class GetTaskQueryParamsSerializer(serializers.Serializer):
    assigneeId = serializers.CharField(required=False, allow_blank=False)
    status = serializers.ChoiceField(required=False, choices=[status.value for status in TaskStatus])
    goalId = serializers.CharField(required=False, allow_blank=False)
    openOnly = serializers.BooleanField(required=False, default=False)
    mine = serializers.BooleanField(required=False, default=False)
    sort_by = serializers.ChoiceField(choices=SORT_FIELDS, required=False, default=DEFAULT_SORT_FIELD)
    order = serializers.ChoiceField(
        choices=[SORT_ORDER_ASC, SORT_ORDER_DESC], required=False, default=DEFAULT_SORT_ORDER
    )

    def validate_goalId(self, value):
        if not ObjectId.is_valid(value):
            raise serializers.ValidationError(ValidationErrors.INVALID_OBJECT_ID.format(value))
        return value
