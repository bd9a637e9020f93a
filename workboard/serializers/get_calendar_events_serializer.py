from rest_framework import serializers

from workboard.constants.messages import ValidationErrors


class GetCalendarEventsQueryParamsSerializer(serializers.Serializer):
    start = serializers.DateTimeField(required=False)
    end = serializers.DateTimeField(required=False)

    def validate(self, data):
        start = data.get("start")
        end = data.get("end")
        if start and end and start > end:
            raise serializers.ValidationError({"start": [ValidationErrors.INVALID_DATE_RANGE]})
        return data
