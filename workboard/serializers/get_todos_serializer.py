from rest_framework import serializers

from workboard.constants.todo import ToDoCategory, ToDoStatus


class GetToDosQueryParamsSerializer(serializers.Serializer):
    assigneeId = serializers.CharField(required=False)
    category = serializers.ChoiceField(required=False, choices=[category.value for category in ToDoCategory])
    status = serializers.ChoiceField(required=False, choices=[todo_status.value for todo_status in ToDoStatus])
