from rest_framework import serializers

from workboard.constants.goal import GoalStatus, GoalType


class GetGoalsQueryParamsSerializer(serializers.Serializer):
    status = serializers.ChoiceField(required=False, choices=[goal_status.value for goal_status in GoalStatus])
    type = serializers.ChoiceField(required=False, choices=[goal_type.value for goal_type in GoalType])
