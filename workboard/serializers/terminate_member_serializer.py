from rest_framework import serializers


class TerminateMemberSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, allow_null=True, allow_blank=True, max_length=500, default=None)
