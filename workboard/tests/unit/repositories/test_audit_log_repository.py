from datetime import datetime, timezone
from unittest import TestCase
from unittest.mock import MagicMock, patch

from pymongo import DESCENDING
from pymongo.collection import Collection

from workboard.dto.audit_log_filters_dto import AuditLogFilters
from workboard.models.audit_log import AuditLogModel
from workboard.repositories.audit_log_repository import AuditLogRepository, get_date_window, matches_search


def _log_document(**overrides) -> dict:
    document = {
        "timestamp": datetime(2024, 6, 10, 12, 0, tzinfo=timezone.utc),
        "userId": "auth-admin-001",
        "userEmail": "alice@example.com",
        "userName": "Alice Admin",
        "action": "UPDATE",
        "collectionName": "tasks",
        "docId": "672f7c5b775ee9f4471ff1dd",
        "changes": {"status": {"from": "Not Started", "to": "In Progress"}},
    }
    document.update(overrides)
    return document


class AuditLogRepositoryTests(TestCase):
    def setUp(self):
        self.patcher_get_collection = patch(
            "workboard.repositories.audit_log_repository.AuditLogRepository.get_collection"
        )
        self.mock_get_collection = self.patcher_get_collection.start()
        self.mock_collection = MagicMock(spec=Collection)
        self.mock_get_collection.return_value = self.mock_collection

    def tearDown(self):
        self.patcher_get_collection.stop()

    def test_list_applies_exact_filters_newest_first(self):
        self.mock_collection.find.return_value.sort.return_value = [_log_document()]

        result = AuditLogRepository.list(
            AuditLogFilters(action="UPDATE", collection_name="tasks", user_id="auth-admin-001")
        )

        self.assertEqual(len(result), 1)
        self.mock_collection.find.assert_called_once_with(
            {"action": "UPDATE", "collectionName": "tasks", "userId": "auth-admin-001"}
        )
        self.mock_collection.find.return_value.sort.assert_called_once_with("timestamp", DESCENDING)

    def test_list_applies_date_window(self):
        self.mock_collection.find.return_value.sort.return_value = []
        now = datetime(2024, 6, 12, 15, 30, tzinfo=timezone.utc)

        AuditLogRepository.list(AuditLogFilters(date_range="yesterday"), now=now)

        query = self.mock_collection.find.call_args.args[0]
        self.assertEqual(
            query["timestamp"],
            {
                "$gte": datetime(2024, 6, 11, tzinfo=timezone.utc),
                "$lt": datetime(2024, 6, 12, tzinfo=timezone.utc),
            },
        )

    def test_search_and_limit_are_applied_after_query(self):
        self.mock_collection.find.return_value.sort.return_value = [
            _log_document(docId="first"),
            _log_document(userName="Sam Staff", userEmail="sam@example.com", changes={}),
            _log_document(docId="second"),
            _log_document(docId="third"),
        ]

        result = AuditLogRepository.list(AuditLogFilters(search="ALICE", limit=2))

        self.assertEqual([log.docId for log in result], ["first", "second"])

    def test_create_is_insert_only(self):
        log = AuditLogModel(**_log_document())

        AuditLogRepository.create(log)

        self.mock_collection.insert_one.assert_called_once()
        self.mock_collection.update_one.assert_not_called()
        self.mock_collection.delete_one.assert_not_called()


class DateWindowTests(TestCase):
    def setUp(self):
        self.now = datetime(2024, 6, 12, 15, 30, tzinfo=timezone.utc)

    def test_today_starts_at_midnight(self):
        self.assertEqual(get_date_window("today", self.now), (datetime(2024, 6, 12, tzinfo=timezone.utc), None))

    def test_week_and_month_are_rolling(self):
        self.assertEqual(get_date_window("week", self.now)[0], datetime(2024, 6, 5, 15, 30, tzinfo=timezone.utc))
        self.assertEqual(get_date_window("month", self.now)[0], datetime(2024, 5, 13, 15, 30, tzinfo=timezone.utc))

    def test_unknown_range_raises(self):
        with self.assertRaises(ValueError):
            get_date_window("decade", self.now)


class MatchesSearchTests(TestCase):
    def test_search_covers_changes_content(self):
        log = AuditLogModel(**_log_document())

        self.assertTrue(matches_search(log, "in progress"))
        self.assertFalse(matches_search(log, "terminated"))
