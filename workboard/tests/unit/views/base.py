from unittest.mock import patch

from django.apps import apps
from django.conf import settings
from rest_framework.test import APIClient, APISimpleTestCase

from workboard.models.team_member import TeamMemberModel
from workboard.tests.fixtures.team_member import team_models
from workboard.utils.jwt_utils import generate_token_pair


class AuthenticatedViewTestCase(APISimpleTestCase):
    """Signs requests in as `member`, resolving the profile without touching MongoDB."""

    member: TeamMemberModel

    def setUp(self):
        self.client = APIClient()
        member_patcher = patch("workboard.middlewares.jwt_auth.TeamMemberRepository.get_by_id")
        self.mock_get_member = member_patcher.start()
        self.addCleanup(member_patcher.stop)
        self.login_as(self.member)

    def login_as(self, member: TeamMemberModel):
        self.mock_get_member.return_value = member
        tokens = generate_token_pair(member.id)
        self.client.cookies[settings.COOKIE_SETTINGS["ACCESS_COOKIE_NAME"]] = tokens["access_token"]
        self.client.cookies[settings.COOKIE_SETTINGS["REFRESH_COOKIE_NAME"]] = tokens["refresh_token"]

    @property
    def notifications(self):
        return apps.get_app_config("workboard").notification_registry

    def tearDown(self):
        for member in team_models:
            self.notifications.clear(member.id)
