from django.conf import settings
from rest_framework import serializers

from workboard.constants.audit import AuditAction, AuditDateRange
from workboard.constants.messages import ValidationErrors

MAX_PAGE_LIMIT = settings.REST_FRAMEWORK["DEFAULT_PAGINATION_SETTINGS"]["MAX_PAGE_LIMIT"]


class GetAuditLogsQueryParamsSerializer(serializers.Serializer):
    action = serializers.ChoiceField(required=False, choices=[action.value for action in AuditAction])
    collectionName = serializers.CharField(required=False)
    userId = serializers.CharField(required=False)
    dateRange = serializers.ChoiceField(required=False, choices=[date_range.value for date_range in AuditDateRange])
    search = serializers.CharField(required=False, allow_blank=True)
    limit = serializers.IntegerField(
        required=False,
        min_value=1,
        max_value=MAX_PAGE_LIMIT,
        error_messages={
            "min_value": ValidationErrors.LIMIT_POSITIVE,
            "max_value": ValidationErrors.MAX_LIMIT_EXCEEDED.format(MAX_PAGE_LIMIT),
        },
    )
