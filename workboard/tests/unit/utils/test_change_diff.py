from unittest import TestCase

from workboard.constants.audit import REDACTED
from workboard.utils.change_diff import calculate_changes, is_sensitive_key, sanitize_data


class CalculateChangesTests(TestCase):
    def test_identical_snapshots_have_no_changes(self):
        snapshot = {"title": "Call patient", "steps": [{"text": "dial", "completed": False}], "meta": {"a": 1}}

        self.assertEqual(calculate_changes(snapshot, dict(snapshot)), {})

    def test_records_changed_added_and_removed_keys(self):
        previous = {"title": "Call patient", "status": "Not Started", "notes": "old"}
        current = {"title": "Call patient", "status": "In Progress", "priority": "High"}

        changes = calculate_changes(previous, current)

        self.assertEqual(
            changes,
            {
                "status": {"from": "Not Started", "to": "In Progress"},
                "priority": {"from": None, "to": "High"},
                "notes": {"from": "old", "to": None},
            },
        )

    def test_nested_values_are_compared_by_content(self):
        previous = {"actionSteps": [{"text": "dial", "completed": False}]}
        same = {"actionSteps": [{"text": "dial", "completed": False}]}
        toggled = {"actionSteps": [{"text": "dial", "completed": True}]}

        self.assertEqual(calculate_changes(previous, same), {})
        self.assertEqual(
            calculate_changes(previous, toggled)["actionSteps"]["to"], [{"text": "dial", "completed": True}]
        )

    def test_bool_to_int_is_a_change(self):
        changes = calculate_changes({"isArchived": True, "order": 0}, {"isArchived": 1, "order": False})

        self.assertEqual(
            changes,
            {"isArchived": {"from": True, "to": 1}, "order": {"from": 0, "to": False}},
        )

    def test_nested_bool_to_int_is_a_change(self):
        changes = calculate_changes({"settings": {"flag": True}}, {"settings": {"flag": 1}})
        self.assertEqual(set(changes), {"settings"})

    def test_null_to_value_is_a_change(self):
        changes = calculate_changes({"assigneeId": None}, {"assigneeId": "u1"})

        self.assertEqual(changes, {"assigneeId": {"from": None, "to": "u1"}})

    def test_sensitive_keys_are_recorded_as_redacted(self):
        changes = calculate_changes({"password": "hunter2"}, {"password": "hunter3"})

        self.assertEqual(changes, {"password": {"from": REDACTED, "to": REDACTED}})

    def test_unchanged_sensitive_key_is_not_recorded(self):
        self.assertEqual(calculate_changes({"apiKey": "abc"}, {"apiKey": "abc"}), {})

    def test_handles_missing_snapshots(self):
        self.assertEqual(calculate_changes(None, {"title": "x"}), {"title": {"from": None, "to": "x"}})
        self.assertEqual(calculate_changes({"title": "x"}, None), {"title": {"from": "x", "to": None}})


class SanitizeDataTests(TestCase):
    def test_redacts_sensitive_keys_at_any_depth(self):
        data = {
            "name": "Alice",
            "password": "secret-value",
            "profile": {"authToken": "abc", "city": "Leeds"},
            "devices": [{"deviceKey": "k1", "label": "phone"}],
        }

        sanitized = sanitize_data(data)

        self.assertEqual(sanitized["name"], "Alice")
        self.assertEqual(sanitized["password"], REDACTED)
        self.assertEqual(sanitized["profile"], {"authToken": REDACTED, "city": "Leeds"})
        self.assertEqual(sanitized["devices"], [{"deviceKey": REDACTED, "label": "phone"}])

    def test_does_not_mutate_input(self):
        data = {"secret": "x", "nested": {"token": "y"}}

        sanitize_data(data)

        self.assertEqual(data, {"secret": "x", "nested": {"token": "y"}})

    def test_empty_input_returns_empty_dict(self):
        self.assertEqual(sanitize_data(None), {})
        self.assertEqual(sanitize_data({}), {})

    def test_sensitive_key_match_is_case_insensitive_substring(self):
        self.assertTrue(is_sensitive_key("RefreshToken"))
        self.assertTrue(is_sensitive_key("AUTH_header"))
        self.assertFalse(is_sensitive_key("title"))
