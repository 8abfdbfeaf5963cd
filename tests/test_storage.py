"""
Unit tests for loading dashboard data files.

Storage contract:
- Missing / invalid file -> DashboardDataError
- Naive timestamps are read as UTC
- Submission entries are keyed by (course_id, session_name)
"""

import json
import tempfile
import unittest
from datetime import datetime, timezone
from pathlib import Path

from studenthome.model import SessionKey
from studenthome.storage import DashboardDataError, load_dashboard

DATA = {
    "account": {"google_id": "alice", "name": "Alice"},
    "courses": [
        {
            "id": "CS2103",
            "name": "Software Engineering",
            "sessions": [
                {
                    "name": "Quiz",
                    "start_time": "2026-10-01T00:00:00",
                    "end_time": "2026-10-30T23:59:00+08:00",
                    "grace_period_minutes": 15,
                }
            ],
        }
    ],
    "submissions": [{"course_id": "CS2103", "session_name": "Quiz", "submitted": True}],
}


class TestLoadDashboard(unittest.TestCase):
    def write(self, d: str, payload) -> Path:
        p = Path(d) / "dashboard.json"
        text = payload if isinstance(payload, str) else json.dumps(payload)
        p.write_text(text, encoding="utf-8")
        return p

    def test_load_valid_file(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            account, courses, submissions = load_dashboard(self.write(d, DATA))

        self.assertEqual(account.google_id, "alice")
        self.assertEqual(len(courses), 1)
        self.assertEqual(courses[0].course.id, "CS2103")

        fs = courses[0].feedback_sessions[0]
        self.assertEqual(fs.course_id, "CS2103")
        self.assertEqual(fs.grace_period_minutes, 15)
        self.assertEqual(fs.start_time, datetime(2026, 10, 1, tzinfo=timezone.utc))
        self.assertIsNotNone(fs.end_time.tzinfo)
        self.assertIsNone(fs.visible_from)

        self.assertTrue(submissions.has_submitted(SessionKey("CS2103", "Quiz")))

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(DashboardDataError):
                load_dashboard(Path(d) / "missing.json")

    def test_invalid_json(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(DashboardDataError):
                load_dashboard(self.write(d, "{not json"))

    def test_missing_account(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(DashboardDataError):
                load_dashboard(self.write(d, {"courses": []}))

    def test_bad_timestamp(self) -> None:
        data = json.loads(json.dumps(DATA))
        data["courses"][0]["sessions"][0]["end_time"] = "tomorrow"
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(DashboardDataError):
                load_dashboard(self.write(d, data))

    def test_submitted_flag_is_required(self) -> None:
        data = json.loads(json.dumps(DATA))
        del data["submissions"][0]["submitted"]
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(DashboardDataError):
                load_dashboard(self.write(d, data))

    def test_submitted_flag_must_be_boolean(self) -> None:
        data = json.loads(json.dumps(DATA))
        data["submissions"][0]["submitted"] = "false"
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(DashboardDataError):
                load_dashboard(self.write(d, data))

    def test_results_follow_visible_must_be_boolean(self) -> None:
        data = json.loads(json.dumps(DATA))
        data["courses"][0]["sessions"][0]["results_follow_visible"] = "yes"
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(DashboardDataError):
                load_dashboard(self.write(d, data))

    def test_results_follow_visible_defaults_to_false(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            _, courses, _ = load_dashboard(self.write(d, DATA))
        self.assertFalse(courses[0].feedback_sessions[0].results_follow_visible)

    def test_missing_submission_is_not_checked_on_load(self) -> None:
        data = json.loads(json.dumps(DATA))
        data["submissions"] = []
        with tempfile.TemporaryDirectory() as d:
            _, courses, submissions = load_dashboard(self.write(d, data))
        self.assertEqual(len(courses[0].feedback_sessions), 1)
        self.assertEqual(len(submissions), 0)


if __name__ == "__main__":
    unittest.main()
