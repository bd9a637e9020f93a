import copy
from http import HTTPStatus
from unittest.mock import patch

from django.urls import reverse
from pymongo.collection import Collection
from pymongo.errors import OperationFailure

from workboard.constants.audit import BULK_OPERATION_DOC_ID
from workboard.services.team_member_service import TeamMemberService
from workboard.tests.fixtures.task import tasks_db_data
from workboard.tests.fixtures.team_member import ADMIN_ID, STAFF_ID
from workboard.tests.integration.base_mongo_test import AuthenticatedMongoTestCase


class MemberTerminationIntegrationTest(AuthenticatedMongoTestCase):
    def setUp(self):
        super().setUp()
        self.db.tasks.insert_many(copy.deepcopy(tasks_db_data))
        self.in_progress_id, self.not_started_id, self.completed_id, self.open_pool_id = (
            task["_id"] for task in tasks_db_data
        )

    def test_terminate_releases_open_tasks_and_keeps_completed_ones(self):
        response = self.client.post(
            reverse("terminate_team_member", args=[STAFF_ID]), {"reason": "Moved away"}, format="json"
        )

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual(response.data["data"]["releasedTaskCount"], 2)

        member = self.db.team.find_one({"_id": STAFF_ID})
        self.assertEqual(member["status"], "terminated")
        self.assertEqual(member["terminatedBy"], ADMIN_ID)
        self.assertEqual(member["terminationReason"], "Moved away")

        for task_id in (self.in_progress_id, self.not_started_id):
            task = self.db.tasks.find_one({"_id": task_id})
            self.assertIsNone(task["assigneeId"])
            self.assertEqual(task["status"], "Not Started")

        completed = self.db.tasks.find_one({"_id": self.completed_id})
        self.assertEqual(completed["assigneeId"], STAFF_ID)
        self.assertEqual(completed["status"], "Completed")

    def test_terminate_writes_member_and_bulk_audit_entries(self):
        self.client.post(reverse("terminate_team_member", args=[STAFF_ID]), format="json")

        member_entry = self.db.auditLogs.find_one({"collectionName": "team", "docId": STAFF_ID})
        self.assertEqual(member_entry["action"], "UPDATE")
        self.assertEqual(member_entry["changes"]["status"], {"from": "active", "to": "terminated"})
        self.assertEqual(member_entry["userId"], ADMIN_ID)

        bulk_entry = self.db.auditLogs.find_one({"docId": BULK_OPERATION_DOC_ID})
        self.assertEqual(bulk_entry["changes"]["operation"], "BULK_RELEASE_TASKS")
        self.assertEqual(bulk_entry["changes"]["documentCount"], 2)

    def test_terminated_member_can_no_longer_sign_in(self):
        self.client.post(reverse("terminate_team_member", args=[STAFF_ID]), format="json")
        self.login_as(STAFF_ID)

        response = self.client.get(reverse("tasks"))

        self.assertEqual(response.status_code, HTTPStatus.UNAUTHORIZED)

    def test_terminating_twice_conflicts(self):
        url = reverse("terminate_team_member", args=[STAFF_ID])
        self.client.post(url, format="json")

        response = self.client.post(url, format="json")

        self.assertEqual(response.status_code, HTTPStatus.CONFLICT)

    def test_reactivation_leaves_released_tasks_in_open_pool(self):
        self.client.post(reverse("terminate_team_member", args=[STAFF_ID]), format="json")

        response = self.client.post(reverse("reactivate_team_member", args=[STAFF_ID]))

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual(self.db.team.find_one({"_id": STAFF_ID})["status"], "active")
        self.assertIsNone(self.db.tasks.find_one({"_id": self.in_progress_id})["assigneeId"])

    def test_failed_task_release_rolls_back_the_termination(self):
        original_update_many = Collection.update_many

        def fail_on_tasks(collection, *args, **kwargs):
            if collection.name == "tasks":
                raise OperationFailure("WriteConflict")
            return original_update_many(collection, *args, **kwargs)

        with patch.object(Collection, "update_many", autospec=True, side_effect=fail_on_tasks):
            with self.assertRaises(OperationFailure):
                TeamMemberService.terminate_member(STAFF_ID, ADMIN_ID, "Moved away")

        member = self.db.team.find_one({"_id": STAFF_ID})
        self.assertEqual(member["status"], "active")
        self.assertIsNone(member.get("terminatedDate"))
        self.assertIsNone(member.get("terminatedBy"))

        for task_id in (self.in_progress_id, self.not_started_id):
            self.assertEqual(self.db.tasks.find_one({"_id": task_id})["assigneeId"], STAFF_ID)


class TaskClaimIntegrationTest(AuthenticatedMongoTestCase):
    member_id = STAFF_ID

    def setUp(self):
        super().setUp()
        self.db.tasks.insert_many(copy.deepcopy(tasks_db_data))
        self.open_pool_id = str(tasks_db_data[3]["_id"])

    def test_claim_then_second_claim_conflicts(self):
        url = reverse("claim_task", args=[self.open_pool_id])

        first = self.client.post(url)
        self.login_as(ADMIN_ID)
        second = self.client.post(url)

        self.assertEqual(first.status_code, HTTPStatus.OK)
        self.assertEqual(first.data["data"]["assignee"], {"id": STAFF_ID, "name": "Sam Staff"})
        self.assertEqual(second.status_code, HTTPStatus.CONFLICT)

    def test_open_pool_listing_excludes_claimed_tasks(self):
        self.client.post(reverse("claim_task", args=[self.open_pool_id]))

        response = self.client.get(reverse("tasks"), {"openOnly": "true"})

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual(response.data["tasks"], [])

    def test_unclaim_returns_task_to_pool(self):
        self.client.post(reverse("claim_task", args=[self.open_pool_id]))

        response = self.client.post(reverse("unclaim_task", args=[self.open_pool_id]))

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertIsNone(response.data["data"]["assigneeId"])
        self.assertEqual(response.data["data"]["status"], "Not Started")
