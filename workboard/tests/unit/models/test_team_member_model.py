from datetime import datetime, timezone
from unittest import TestCase

from bson import ObjectId
from pydantic import ValidationError

from workboard.constants.team import MemberRole, MemberStatus
from workboard.models.task import TaskModel
from workboard.models.team_member import TeamMemberModel


class TeamMemberModelTest(TestCase):
    def test_new_member_is_active_staff(self):
        member = TeamMemberModel(_id="uid-1", name="Dana", email="dana@example.com")

        self.assertEqual(member.id, "uid-1")
        self.assertTrue(member.is_active)
        self.assertFalse(member.is_admin)

    def test_terminated_admin(self):
        member = TeamMemberModel(
            _id="uid-2",
            name="Lee",
            email="lee@example.com",
            role=MemberRole.ADMIN,
            status=MemberStatus.TERMINATED,
        )

        self.assertTrue(member.is_admin)
        self.assertFalse(member.is_active)

    def test_empty_name_is_rejected(self):
        with self.assertRaises(ValidationError):
            TeamMemberModel(_id="uid-3", name="", email="x@example.com")

    def test_dump_uses_string_id(self):
        member = TeamMemberModel(_id="uid-4", name="Sam", email="sam@example.com")
        data = member.model_dump(by_alias=True, exclude_none=True)

        self.assertEqual(data["_id"], "uid-4")
        self.assertEqual(data["status"], "active")


class DocumentSnapshotTest(TestCase):
    def test_snapshot_is_json_safe(self):
        task_id = ObjectId()
        due = datetime(2025, 1, 20, 9, 30, tzinfo=timezone.utc)
        task = TaskModel(_id=task_id, title="Chart review", dueDate=due)

        snapshot = task.to_snapshot()

        self.assertEqual(snapshot["id"], str(task_id))
        self.assertIsInstance(snapshot["dueDate"], str)
        self.assertTrue(snapshot["dueDate"].startswith("2025-01-20T09:30:00"))
        self.assertEqual(snapshot["status"], "Not Started")
